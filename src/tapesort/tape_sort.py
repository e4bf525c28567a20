import logging

from .compare import natural_compare
from .tape import Tape

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    pass


class TapeSorter():
    """
    Merge sorts for sequential-access tapes.

    sort: the standard 3-tape sort (input tape + 2 auxiliary tapes)
    multi_sort: input tape + num_tapes auxiliary tapes, num_tapes >= 2
    balanced_sort: two groups of num_tapes tapes that swap roles every
                   pass, so splitting and merging happen together

    All sorts are ascending under compare: for any a before b on the
    result, compare(a, b) <= 0. They lean on Tape.advance() refusing to
    move off an empty cell.

    compare: three-way comparison function, natural ordering by default.
             Pass a ComparisonCounter to measure comparisons.

    Every tape a sorter touches is kept in self.tapes so total_writes()
    can report the sum over all sorts run by this instance.
    """

    def __init__(self, compare=None):
        self.compare = compare if compare is not None else natural_compare
        self.tapes = []

    def _less(self, a, b):
        return self.compare(a, b) < 0

    def total_writes(self):
        return sum(tape.writes for tape in self.tapes)

    def sort(self, to_sort):
        """
        Sort to_sort in place with two auxiliary tapes and return it.

        Each pass splits to_sort onto the two tapes by ascending runs,
        then merges them back. The number of passes is not fixed: the
        loop stops as soon as a split leaves the second tape empty.
        """
        to_sort.rewind()
        tapes = [Tape(), Tape()]
        self.tapes.append(to_sort)
        self.tapes.extend(tapes)

        passes = 0
        while True:
            passes += 1
            runs = self._split(to_sort, tapes)
            for tape in tapes:
                tape.rewind()
            logger.debug("sort: pass %d split %d runs", passes, runs)

            # Everything went onto tape 0, so to_sort was already in order.
            if tapes[1].read() is None:
                to_sort.rewind()
                logger.debug("sort: done after %d passes, %d writes",
                             passes, self.total_writes())
                return to_sort

            to_sort.erase()
            self._merge_pair(tapes[0], tapes[1], to_sort)
            for tape in tapes:
                tape.erase()
            to_sort.rewind()

    def multi_sort(self, to_sort, num_tapes):
        """
        Sort to_sort in place using num_tapes auxiliary tapes and return it.
        With num_tapes == 2 this does the same work as sort().
        """
        if num_tapes < 2:
            raise InvalidArgument("multi_sort needs at least 2 auxiliary tapes, got %r" % (num_tapes,))
        to_sort.rewind()
        tapes = [Tape() for i in range(num_tapes)]
        self.tapes.append(to_sort)
        self.tapes.extend(tapes)

        passes = 0
        while True:
            passes += 1
            runs = self._split(to_sort, tapes)
            for tape in tapes:
                tape.rewind()
            logger.debug("multi_sort: pass %d split %d runs over %d tapes",
                         passes, runs, num_tapes)

            if tapes[1].read() is None:
                to_sort.rewind()
                logger.debug("multi_sort: done after %d passes, %d writes",
                             passes, self.total_writes())
                return to_sort

            to_sort.erase()
            self._merge_many(tapes, to_sort)
            for tape in tapes:
                tape.erase()
            to_sort.rewind()

    def balanced_sort(self, to_sort, num_tapes):
        """
        Sort using two groups of num_tapes tapes each; to_sort is tape 0
        of the first "from" group.

        Runs are merged from the "from" group onto one "to" tape at a
        time; each time a new generation of runs starts, the next "to"
        tape takes over. When the "from" group is used up the groups swap.
        Sorting is done when a pass puts everything on "to" tape 0.

        The returned tape is usually not to_sort, whose contents are
        erased along the way.
        """
        if num_tapes < 2:
            raise InvalidArgument("balanced_sort needs at least 2 tapes per group, got %r" % (num_tapes,))
        to_sort.rewind()
        from_tapes = [to_sort] + [Tape() for i in range(num_tapes - 1)]
        to_tapes = [Tape() for i in range(num_tapes)]
        self.tapes.extend(from_tapes)
        self.tapes.extend(to_tapes)

        if to_sort.read() is None:
            return to_sort

        active = [True] + [False] * (num_tapes - 1)
        empty_count = num_tapes - 1
        to_index = 0
        passes = 1
        while True:
            first = self._first_active(active)
            if first is None:
                # Next generation of runs goes onto the next "to" tape.
                to_index = (to_index + 1) % num_tapes
                active = [tape.read() is not None for tape in from_tapes]
                continue

            min_index = self._min_active(from_tapes, active, first)
            source = from_tapes[min_index]
            dest = to_tapes[to_index]
            dest.advance()
            dest.write(source.read())
            source.advance()

            if source.read() is None:
                active[min_index] = False
                empty_count += 1
                if empty_count == num_tapes:
                    to_tapes[1].rewind()
                    if to_tapes[1].read() is None:
                        break
                    logger.debug("balanced_sort: pass %d ended on to tape %d",
                                 passes, to_index)
                    passes += 1

                    from_tapes, to_tapes = to_tapes, from_tapes
                    for tape in from_tapes:
                        tape.rewind()
                    active = [tape.read() is not None for tape in from_tapes]
                    empty_count = active.count(False)
                    for tape in to_tapes:
                        tape.erase()
                    to_index = 0
            elif self._less(source.read(), dest.read()):
                active[min_index] = False

        logger.debug("balanced_sort: done after %d passes, %d writes",
                     passes, self.total_writes())
        to_tapes[0].rewind()
        return to_tapes[0]

    def _split(self, source, tapes):
        """
        Distribute source onto tapes, moving to the next tape whenever an
        item is smaller than the last one written (a new run starts).
        Returns the number of runs written.
        """
        first = source.read()
        if first is None:
            return 0
        current = 0
        tapes[current].write(first)
        source.advance()
        runs = 1
        while source.read() is not None:
            if self._less(source.read(), tapes[current].read()):
                current = (current + 1) % len(tapes)
                runs += 1
            # No-op on a tape that is still empty.
            tapes[current].advance()
            tapes[current].write(source.read())
            source.advance()
        return runs

    def _merge_pair(self, a, b, out):
        while a.read() is not None and b.read() is not None:
            # Start of a merged run
            if out.read() is None:
                if self._less(a.read(), b.read()):
                    out.write(a.read())
                    a.advance()
                else:
                    out.write(b.read())
                    b.advance()
            # The run on a has ended: finish the run on b.
            elif self._less(a.read(), out.read()):
                self._drain_run(b, out)
                out.advance()
            elif self._less(b.read(), out.read()):
                self._drain_run(a, out)
                out.advance()
            elif self._less(a.read(), b.read()):
                out.advance()
                out.write(a.read())
                a.advance()
            else:
                out.advance()
                out.write(b.read())
                b.advance()

        for tape in (a, b):
            while tape.read() is not None:
                out.advance()
                out.write(tape.read())
                tape.advance()

    def _drain_run(self, tape, out):
        while tape.read() is not None and not self._less(tape.read(), out.read()):
            out.advance()
            out.write(tape.read())
            tape.advance()

    def _merge_many(self, tapes, out):
        """
        Merge all runs on tapes back onto out, one generation of runs at
        a time. A tape is active while its current run lasts.
        """
        active = [tape.read() is not None for tape in tapes]
        empty_count = active.count(False)
        while True:
            first = self._first_active(active)
            if first is None:
                active = [tape.read() is not None for tape in tapes]
                continue

            min_index = self._min_active(tapes, active, first)
            source = tapes[min_index]
            out.advance()
            out.write(source.read())
            source.advance()

            if source.read() is None:
                active[min_index] = False
                empty_count += 1
                if empty_count == len(tapes):
                    return
            elif self._less(source.read(), out.read()):
                active[min_index] = False

    @staticmethod
    def _first_active(active):
        for i, is_active in enumerate(active):
            if is_active:
                return i
        return None

    def _min_active(self, tapes, active, first):
        # Strict comparison: on ties the lowest index wins.
        min_index = first
        for i in range(first + 1, len(tapes)):
            if active[i] and self._less(tapes[i].read(), tapes[min_index].read()):
                min_index = i
        return min_index
