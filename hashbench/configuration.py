import json
import logging

from typing import Literal

from pydantic import BaseModel, field_validator

from hashbench.hashes import HashTable, LinearProbingHashTable, OrderedLinearProbingHashTable, \
    QuadraticProbingHashTable, SeparateChainingHashTable
from hashbench.utils.primes import PrimeGenerator

STRATEGIES = {
    "linear": LinearProbingHashTable,
    "ordered": OrderedLinearProbingHashTable,
    "quadratic": QuadraticProbingHashTable,
    "chaining": SeparateChainingHashTable,
}

Strategy = Literal["linear", "ordered", "quadratic", "chaining"]


class TableConfiguration(BaseModel):
    strategy: Strategy = "linear"
    soft_deletion: bool = False
    initial_capacity: int = PrimeGenerator.DEFAULT_INITIAL_PRIME

    @field_validator("initial_capacity")
    @classmethod
    def _positive_capacity(cls, capacity: int) -> int:
        if capacity < 1:
            raise ValueError("initial_capacity must be a positive integer")
        return capacity

    @property
    def name(self) -> str:
        """A short label for reports, e.g. linear-hard"""
        if self.strategy == "chaining":
            return self.strategy
        return f"{self.strategy}-{'soft' if self.soft_deletion else 'hard'}"

    def build(self) -> HashTable:
        """Create a fresh, empty table as described by this configuration"""
        logger = logging.getLogger(self.__class__.__name__)
        logger.debug(f"building {self.name} table with initial capacity {self.initial_capacity}")

        primes = PrimeGenerator(self.initial_capacity)
        if self.strategy == "chaining":
            return SeparateChainingHashTable(prime_generator=primes)
        return STRATEGIES[self.strategy](soft=self.soft_deletion, prime_generator=primes)

    @staticmethod
    def construct_all(soft_deletion: bool = False, initial_capacity: int = PrimeGenerator.DEFAULT_INITIAL_PRIME):
        """One configuration per strategy, sharing the deletion mode and initial capacity"""
        return [
            TableConfiguration(strategy=strategy, soft_deletion=soft_deletion, initial_capacity=initial_capacity)
            for strategy in STRATEGIES
        ]

    def display(self):
        print(json.dumps(self.model_dump(), indent=4))

    def save(self, name, prefix='configurations') -> str:
        logger = logging.getLogger(self.__class__.__name__)
        path = f"{prefix}/{name}.cfg.json"
        logger.info(f"saving table configuration as: {path}")
        with open(path, "w") as fp:
            json.dump(self.model_dump(), fp, indent=4)
        return path

    @staticmethod
    def load(path: str) -> 'TableConfiguration':
        with open(path, "r") as fp:
            return TableConfiguration.model_validate(json.load(fp))
