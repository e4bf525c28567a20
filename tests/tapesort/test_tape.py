import unittest
from src.tapesort.tape import Tape


class TestTape(unittest.TestCase):
    def test_empty_tape(self):
        t = Tape()
        assert t.read() is None
        assert t.writes == 0
        assert len(t) == 0
        assert t.to_list() == []

    def test_load_values(self):
        t = Tape([3, 1, 2])
        assert t.read() == 3
        assert t.writes == 0
        assert len(t) == 3
        assert t.to_list() == [3, 1, 2]

    def test_write_and_advance(self):
        t = Tape()
        t.write(7)
        t.advance()
        assert t.read() is None
        t.write(8)
        assert t.writes == 2
        t.rewind()
        assert t.read() == 7
        t.advance()
        assert t.read() == 8

    def test_advance_on_empty_cell_is_noop(self):
        t = Tape([1])
        t.advance()
        assert t.read() is None
        t.advance()
        t.advance()
        t.write(2)
        assert t.to_list() == [1, 2]

    def test_overwrite(self):
        t = Tape([1, 2, 3])
        t.advance()
        t.write(9)
        assert t.to_list() == [1, 9, 3]
        assert t.writes == 1

    def test_write_none_rejected(self):
        t = Tape()
        with self.assertRaises(ValueError):
            t.write(None)
        assert t.writes == 0

    def test_rewind_keeps_contents(self):
        t = Tape([4, 5])
        t.advance()
        t.write(6)
        t.rewind()
        assert t.read() == 4
        assert t.writes == 1

    def test_erase(self):
        t = Tape([1, 2, 3])
        t.advance()
        t.write(5)
        t.erase()
        assert t.read() is None
        assert len(t) == 0
        assert t.writes == 1
        t.advance()
        t.write(4)
        assert t.to_list() == [4]

    def test_reset_writes(self):
        t = Tape()
        for v in range(5):
            t.write(v + 1)
            t.advance()
        assert t.writes == 5
        t.reset_writes()
        assert t.writes == 0

    def test_to_list_leaves_cursor_at_end(self):
        t = Tape([1, 2])
        assert t.to_list() == [1, 2]
        assert t.read() is None
        t.write(3)
        t.rewind()
        assert t.to_list() == [1, 2, 3]

    def test_len_does_not_move_cursor(self):
        t = Tape([1, 2, 3])
        t.advance()
        assert len(t) == 3
        assert t.read() == 2

    def test_repr(self):
        t = Tape([1, 2])
        t.write(5)
        assert repr(t) == "Tape([5, 2], writes=1)"


if __name__ == '__main__':
    unittest.main()
