import logging

import matplotlib
import matplotlib.pyplot as plt

from matplotlib.axes import Axes
from hashbench.configuration import TableConfiguration
from hashbench.generators import IncrementalDataGenerator, RandomStringDataGenerator, WorkloadGenerator
from hashbench.harness import WorkloadRunner, generate_workload
from hashbench.utils.performance import track_runtime

logging.basicConfig(level=logging.INFO)

WORKLOAD_SIZES = [100, 500, 1000, 5000, 10000]
SEED = 420


def probes_per_strategy(axis: Axes, operations=5000, seed=SEED) -> Axes:
    workload = generate_workload(operations, seed)
    hard = WorkloadRunner(TableConfiguration.construct_all(soft_deletion=False)).run(workload)
    soft = WorkloadRunner(TableConfiguration.construct_all(soft_deletion=True)).run(workload)

    names = list(hard.keys())
    positions = range(len(names))
    axis.bar([p - 0.2 for p in positions], [hard[n].probes for n in names], width=0.4, color='blue', label="hard")
    axis.bar(
        [p + 0.2 for p in positions],
        [soft[n.replace('-hard', '-soft')].probes for n in names],
        width=0.4, color='red', label="soft"
    )

    axis.set_title(f"{operations:,} Mixed Operations")
    axis.set_xticks(list(positions))
    axis.set_xticklabels([n.split('-')[0] for n in names])
    axis.set_ylabel("Total Probes")
    axis.get_yaxis().set_major_formatter(matplotlib.ticker.FuncFormatter(lambda x, p: format(int(x), ',')))
    axis.legend(loc='upper left')

    return axis


def miss_probes_sensitivity_to_size(axis: Axes, seed=SEED) -> Axes:
    mean_miss_probes = {configuration.name: [] for configuration in TableConfiguration.construct_all()}

    for size in WORKLOAD_SIZES:
        workload = WorkloadGenerator(
            IncrementalDataGenerator("key", width=6),
            RandomStringDataGenerator(8, seed=seed),
            seed=seed
        ).insert_then_query(size, misses=size)
        results, elapsed = track_runtime(WorkloadRunner(TableConfiguration.construct_all()).run, workload)
        logging.getLogger("miss_probes_sensitivity_to_size").info(f"{size} inserts replayed in {elapsed:.3f}s")
        for name, history in results.items():
            mean_miss_probes[name].append(history.mean("get:miss"))

    for name, values in mean_miss_probes.items():
        axis.plot(range(len(WORKLOAD_SIZES)), values, linestyle='solid', linewidth=2, label=name)

    axis.set_title("Unsuccessful Lookups")
    axis.set_xlabel("Inserted Pairs")
    axis.set_xticks(range(len(WORKLOAD_SIZES)))
    axis.set_xticklabels(WORKLOAD_SIZES, rotation=45)
    axis.set_ylabel("Mean Probes per Miss")
    axis.legend(loc='upper center', bbox_to_anchor=(0.5, -0.25), fancybox=True, shadow=True, ncol=4)

    return axis


def main():
    fig, (left, right) = plt.subplots(1, 2, figsize=(12, 5))
    probes_per_strategy(left)
    miss_probes_sensitivity_to_size(right)
    fig.tight_layout()
    fig.savefig("strategy_comparison.png", dpi=200)


if __name__ == "__main__":
    main()
