class Tape():
    """
    Sequential storage with a single cursor.

    The tape is a list of cells, each holding a value or None (empty).
    The cursor only moves forward, one cell at a time, and only off a
    cell that holds a value; rewind() is the only way back. Cells are
    appended as the cursor reaches the end of the list.

    values: optional iterable to pre-load. Loading does not count as
            writes, so a freshly built tape reports writes == 0.
    """

    def __init__(self, values=None):
        self.cells = [None]
        self.pos = 0
        self._writes = 0
        if values is not None:
            for v in values:
                self.write(v)
                self.advance()
            self.rewind()
            self.reset_writes()

    def read(self):
        return self.cells[self.pos]

    def write(self, value):
        if value is None:
            raise ValueError("None marks an empty cell and cannot be written")
        self._writes += 1
        self.cells[self.pos] = value

    def advance(self):
        # Sorts rely on this being a no-op at the end of the data.
        if self.cells[self.pos] is None:
            return
        self.pos += 1
        if self.pos == len(self.cells):
            self.cells.append(None)

    def rewind(self):
        self.pos = 0

    def erase(self):
        self.cells = [None]
        self.pos = 0

    @property
    def writes(self):
        return self._writes

    def reset_writes(self):
        self._writes = 0

    def to_list(self):
        """
        Return the values on the tape, from the start up to the first empty cell.
        Leaves the cursor at the end of the data.
        """
        out = []
        self.rewind()
        while self.read() is not None:
            out.append(self.read())
            self.advance()
        return out

    def __len__(self):
        n = 0
        while n < len(self.cells) and self.cells[n] is not None:
            n += 1
        return n

    def __repr__(self):
        return "Tape(%r, writes=%d)" % (self.cells[:len(self)], self._writes)
