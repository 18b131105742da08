import random
import string
import typing


class DataGenerator:
    """Base Class for generating string keys or values"""
    def __init__(self, already_generated: int = 0, generatable: bool = True):
        assert already_generated >= 0, "Item counts cannot be negative"

        self._items_generated = already_generated
        self._generatable = generatable

    def generate_data(self) -> str:
        """
        @final no override
        Produce the next string and bump the generated-items counter
        """
        if not self._generatable:
            raise RuntimeError("This generator is not able to generate more data")

        data = self._generate()
        self._items_generated += 1
        return data

    @property
    def items_generated(self):
        """The amount of strings generated in this instance"""
        return self._items_generated

    @property
    def generatable(self):
        """The state of the generation production capability"""
        return self._generatable

    def set_generatable(self, state: bool):
        """Set the state of the generation production capability"""
        self._generatable = state

    def _generate(self) -> str:
        """
        @implementable
        Produce one string; subclasses decide how
        """
        raise NotImplementedError


class ConstantDataGenerator(DataGenerator):
    """Generate the same string every time"""
    def __init__(self, constant: str):
        super().__init__()
        assert constant, "The constant must be a non-empty string"
        self._constant = constant

    def _generate(self) -> str:
        return self._constant


class IncrementalDataGenerator(DataGenerator):
    """Generate prefix0, prefix1, ... optionally zero padded"""
    def __init__(self, prefix: str = "key", start: int = 0, width: int = 0):
        super().__init__()
        assert start >= 0, "Counters start at a non-negative integer"
        self._prefix = prefix
        self._next = start
        self._width = width

    def _generate(self) -> str:
        data = f"{self._prefix}{self._next:0{self._width}d}"
        self._next += 1
        return data


class RandomStringDataGenerator(DataGenerator):
    """
    Generate strings of uniformly random characters.

    @param length: The length of each string, or a (min, max) inclusive range.
    @param alphabet: The characters to draw from.
    @param seed: Seeds a private random stream so runs are repeatable.
    """
    def __init__(
            self,
            length: typing.Union[int, typing.Tuple[int, int]] = 8,
            alphabet: str = string.ascii_lowercase,
            seed: int = None
            ):
        super().__init__()
        self._min_length, self._max_length = (length, length) if isinstance(length, int) else length
        assert 1 <= self._min_length <= self._max_length, "Lengths must be positive and the range ordered"
        assert alphabet, "The alphabet cannot be empty"
        self._alphabet = alphabet
        self._random = random.Random(seed)

    def _generate(self) -> str:
        length = self._random.randint(self._min_length, self._max_length)
        return "".join(self._random.choice(self._alphabet) for _ in range(length))


class DigitStringDataGenerator(RandomStringDataGenerator):
    """Generate fixed-length digit strings, phone-number style"""
    def __init__(self, length: int = 10, seed: int = None):
        super().__init__(length, string.digits, seed)
