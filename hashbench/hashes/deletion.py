class DeletionPolicy:
    """
    Decides what a removal leaves behind in an open-addressing table, and therefore which slots count towards the
    table's load when deciding to resize.
    """
    soft = False

    def load(self, table) -> int:
        """Number of slots that count towards the resize threshold"""
        raise NotImplementedError

    def vacate(self, table, index: int) -> int:
        """Release the live slot at index and return the probes spent doing so"""
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__}>"


class SoftDeletion(DeletionPolicy):
    """Removal leaves a tombstone; tombstones occupy load until the next resize sweeps them away"""
    soft = True

    def load(self, table) -> int:
        return table.size() + table.tombstones()

    def vacate(self, table, index: int) -> int:
        table._mark_tombstone(index)
        return 0


class HardDeletion(DeletionPolicy):
    """Removal empties the slot and has the table repair whatever probe chains ran through it"""
    soft = False

    def load(self, table) -> int:
        return table.size()

    def vacate(self, table, index: int) -> int:
        table._mark_empty(index)
        return table._repair_after_removal(index)


def deletion_policy(soft: bool) -> DeletionPolicy:
    return SoftDeletion() if soft else HardDeletion()
