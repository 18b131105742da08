import argparse
import logging
import os
import typing

from hashbench.configuration import STRATEGIES, TableConfiguration
from hashbench.generators import RandomStringDataGenerator, DigitStringDataGenerator, Workload, WorkloadGenerator
from hashbench.result import ProbeHistory
from hashbench.utils import performance


class WorkloadRunner:
    """
    Replays workloads against a set of table configurations, giving every configuration a fresh table and the exact
    same operations so their probe counts are directly comparable.
    """
    def __init__(self, configurations: typing.List[TableConfiguration]):
        assert configurations, "At least one configuration is required"
        self.logger = logging.getLogger(self.__class__.__name__)
        self.configurations = configurations

    def run_one(self, configuration: TableConfiguration, workload: Workload) -> ProbeHistory:
        table = configuration.build()
        history = ProbeHistory()
        with performance.tracked() as elapsed:
            for operation in workload:
                history.record(operation.kind, operation.apply(table))
        self.logger.info(
            f"{configuration.name}: {len(workload)} operations, {history.probes} probes, "
            f"final size {table.size()}, capacity {table.capacity()}, {elapsed.seconds:.6f}s"
        )
        return history

    def run(self, workload: Workload) -> typing.Dict[str, ProbeHistory]:
        self.logger.info(f"running {workload} against {len(self.configurations)} configurations")
        return {configuration.name: self.run_one(configuration, workload) for configuration in self.configurations}

    @staticmethod
    def save(results: typing.Dict[str, ProbeHistory], prefix: str = 'results'):
        os.makedirs(prefix, exist_ok=True)
        for name, history in results.items():
            history.save(f"{prefix}/{name}.probes")


def generate_workload(operations: int, seed: int = None) -> Workload:
    """A mixed workload of name-like keys and phone-number-like values"""
    generator = WorkloadGenerator(
        RandomStringDataGenerator((4, 12), seed=seed),
        DigitStringDataGenerator(10, seed=seed),
        seed=seed
    )
    return generator.mixed(operations)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare hash table collision strategies by probe count")
    parser.add_argument("workload", help="workload file to replay, or to write when --generate is given")
    parser.add_argument(
        "-s", "--strategy", action="append", choices=list(STRATEGIES),
        help="strategy to run; may be repeated (default: all)"
    )
    parser.add_argument("--soft", action="store_true", help="use soft (tombstone) deletion")
    parser.add_argument("--initial-capacity", type=int, default=7, help="initial table capacity, rounded up to a prime")
    parser.add_argument("--generate", type=int, metavar="N", help="write a random workload of N operations first")
    parser.add_argument("--seed", type=int, help="seed for --generate")
    parser.add_argument("--save", metavar="DIR", help="save per-strategy probe histories into DIR")
    parser.add_argument("--show-config", action="store_true", help="print each table configuration before running")
    parser.add_argument("-v", "--verbose", action="store_true", help="log table resizes and rebuilds")
    return parser


def main(argv: typing.List[str] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.generate:
        generate_workload(args.generate, args.seed).save(args.workload)

    workload = Workload.load(args.workload)
    configurations = [
        TableConfiguration(strategy=strategy, soft_deletion=args.soft, initial_capacity=args.initial_capacity)
        for strategy in (args.strategy or STRATEGIES)
    ]
    if args.show_config:
        for configuration in configurations:
            configuration.display()

    results = WorkloadRunner(configurations).run(workload)
    for name, history in results.items():
        print(f"{name:16} {history.probes:10d} probes  {history.mean():8.3f} mean")
    if args.save:
        WorkloadRunner.save(results, args.save)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
