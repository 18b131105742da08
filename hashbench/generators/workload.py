import logging
import random

from typing import Iterator, List, Optional

from hashbench.generators.data import DataGenerator

PUT = "put"
GET = "get"
REMOVE = "remove"
OPERATION_KINDS = (PUT, GET, REMOVE)


class WorkloadFormatError(ValueError):
    """A workload file line could not be understood"""
    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


class Operation:
    """
    A single table operation.

    @param kind: One of put, get or remove
    @param key: The key operated on
    @param value: The value to insert; only puts carry one
    """
    def __init__(self, kind: str, key: str, value: Optional[str] = None):
        assert kind in OPERATION_KINDS, f"Unknown operation kind {kind}"
        assert (value is not None) == (kind == PUT), "Exactly the put operations carry a value"
        self.kind = kind
        self.key = key
        self.value = value

    def apply(self, table):
        """Run this operation against a table and return its Probes"""
        if self.kind == PUT:
            return table.put(self.key, self.value)
        if self.kind == GET:
            return table.get(self.key)
        return table.remove(self.key)

    def to_line(self) -> str:
        return f"{self.kind} {self.key}" if self.value is None else f"{self.kind} {self.key} {self.value}"

    @staticmethod
    def from_line(line: str, line_number: int = 0) -> 'Operation':
        fields = line.split()
        if not fields or fields[0] not in OPERATION_KINDS:
            raise WorkloadFormatError(line_number, line, "unknown operation")
        expected = 3 if fields[0] == PUT else 2
        if len(fields) != expected:
            raise WorkloadFormatError(line_number, line, f"expected {expected} fields, got {len(fields)}")
        return Operation(*fields)

    def __eq__(self, other):
        if isinstance(other, Operation):
            return (self.kind, self.key, self.value) == (other.kind, other.key, other.value)
        return NotImplemented

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.to_line()}>"


class Workload:
    """An ordered list of operations, stored on disk as one operation per line"""
    def __init__(self, operations: List[Operation] = None, name: str = "workload"):
        self.operations = operations or []
        self.name = name

    def count(self, kind: str) -> int:
        return sum(1 for operation in self.operations if operation.kind == kind)

    def save(self, path: str):
        logger = logging.getLogger(self.__class__.__name__)
        logger.info(f"saving {len(self.operations)} operations as: {path}")
        with open(path, "w") as fp:
            fp.write(f"# {self.name}\n")
            for operation in self.operations:
                fp.write(operation.to_line())
                fp.write("\n")

    @staticmethod
    def load(path: str, name: str = None) -> 'Workload':
        """Parse a workload file. Blank lines and lines starting with # are ignored"""
        operations = []
        with open(path, "r") as fp:
            for line_number, line in enumerate(fp, start=1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                operations.append(Operation.from_line(line, line_number))
        return Workload(operations, name or path)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __len__(self):
        return len(self.operations)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name} operations: {len(self.operations)}>"


class WorkloadGenerator:
    """
    Build workloads from a key generator and a value generator.

    @param key_generator: Produces keys; keys must not contain whitespace so the workload can be saved.
    @param value_generator: Produces values, under the same restriction.
    @param seed: Seeds the choice of operations and of keys to query.
    """
    def __init__(self, key_generator: DataGenerator, value_generator: DataGenerator, seed: int = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self._key_generator = key_generator
        self._value_generator = value_generator
        self._random = random.Random(seed)

    def _new_put(self) -> Operation:
        return Operation(PUT, self._key_generator.generate_data(), self._value_generator.generate_data())

    def insert_then_query(self, inserts: int, misses: int = 0, name: str = "insert-then-query") -> Workload:
        """Insert pairs, look every one of them up, then look up keys that were never inserted"""
        puts = [self._new_put() for _ in range(inserts)]
        inserted = {put.key for put in puts}
        operations = puts + [Operation(GET, put.key) for put in puts]

        while misses > 0:
            key = self._key_generator.generate_data()
            if key in inserted:
                continue
            operations.append(Operation(GET, key))
            misses -= 1

        self.logger.info(f"generated {len(operations)} operations for {name}")
        return Workload(operations, name)

    def mixed(self, total: int, put_ratio: float = 0.5, get_ratio: float = 0.3, name: str = "mixed") -> Workload:
        """
        Draw put, get and remove operations at the given ratios. Gets and removes target keys that are currently live,
        so they exercise hits; the remainder of the ratios goes to removes.
        """
        assert 0 <= put_ratio and 0 <= get_ratio and put_ratio + get_ratio <= 1, "Ratios must form a distribution"

        live = []  # type: List[str]
        operations = []
        for _ in range(total):
            roll = self._random.random()
            if roll < put_ratio or not live:
                operation = self._new_put()
                live.append(operation.key)
            elif roll < put_ratio + get_ratio:
                operation = Operation(GET, self._random.choice(live))
            else:
                operation = Operation(REMOVE, live.pop(self._random.randrange(len(live))))
            operations.append(operation)

        self.logger.info(f"generated {len(operations)} operations for {name}")
        return Workload(operations, name)
