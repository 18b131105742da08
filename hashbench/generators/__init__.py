from .data import DataGenerator, ConstantDataGenerator, IncrementalDataGenerator, RandomStringDataGenerator, \
    DigitStringDataGenerator
from .workload import Operation, Workload, WorkloadFormatError, WorkloadGenerator, PUT, GET, REMOVE
