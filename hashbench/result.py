import typing

from collections import Counter

from hashbench.utils.probes import Probes


class ProbeHistory:
    """Defines a running total of probes spent, with a labelled history of every step"""
    def __init__(self, probes: int = 0, label: str = None):
        self.history = list() if probes == 0 and label is None else [(probes, label)]
        self.probes = probes

    def __add__(self, other):
        if isinstance(other, self.__class__):
            combined = ProbeHistory()
            combined.probes = self.probes + other.probes
            combined.history = self.history + other.history
            return combined
        return NotImplemented

    def step(self, probes: int, label: str = None):
        """Record a step, similar to adding two histories"""
        self.history.append((probes, label))
        self.probes += probes
        return self

    def record(self, kind: str, result: Probes):
        """Record the outcome of a table operation, labelled by kind and hit or miss"""
        return self.step(result.probes, f"{kind}:{'hit' if result.found else 'miss'}")

    def totals(self) -> typing.Dict[str, int]:
        """Probes summed per label"""
        totals = Counter()
        for probes, label in self.history:
            totals[label or ''] += probes
        return dict(totals)

    def counts(self) -> typing.Dict[str, int]:
        """Number of steps per label"""
        return dict(Counter(label or '' for _, label in self.history))

    def mean(self, label: str = None) -> float:
        """Average probes per step, optionally restricted to one label"""
        steps = [probes for probes, step_label in self.history if label is None or step_label == label]
        return sum(steps) / len(steps) if steps else 0.0

    def save(self, path: str):
        """Save the probe history"""
        with open(path, 'w') as fp:
            fp.write(f"probes: {self.probes}\n")
            for label, total in sorted(self.totals().items()):
                fp.write(f"{label or 'unlabelled'}: {total}\n")
            fp.write(f"history: \n")
            for probes, label in self.history:
                fp.write(f"\t{probes}\t{label or ''}\n")

    def __repr__(self):
        return f"<{self.__class__.__name__} probes: {self.probes}, steps: {len(self.history)}>"
