from bitstring import BitArray

from .compare import natural_compare
from .tape import Tape


def is_sorted(values, compare=natural_compare):
    values = list(values)
    return all(compare(values[i], values[i + 1]) <= 0 for i in range(len(values) - 1))


def format_tape(tape, sep=" "):
    """
    Printable dump of the values on a tape, in order.
    Leaves the cursor at the end of the data, like Tape.to_list().
    """
    return sep.join(str(v) for v in tape.to_list())


def encode_gaps(deltas):
    """
    Unary code for gaps between sorted values: d zero bits, then a one bit.
    """
    return BitArray(bin="".join("0" * d + "1" for d in deltas))


def decode_gaps(bits, count):
    deltas = []
    run = 0
    for bit in bits:
        if len(deltas) == count:
            break
        if bit:
            deltas.append(run)
            run = 0
        else:
            run += 1
    return deltas


def encode_sorted_tape(tape):
    """
    Pack a sorted tape of non-negative integers into a BitArray.

    Each value is stored as its gap to the previous one (the first gap is
    taken from 0), written in unary: gap zero bits, then a one bit. Dense
    sorted output packs to roughly two bits per value.

    The tape is rewound afterwards.
    """
    values = tape.to_list()
    tape.rewind()
    deltas = []
    prev = 0
    for v in values:
        if v < 0:
            raise ValueError("Cannot encode negative value %r" % (v,))
        if v < prev:
            raise ValueError("Tape is not sorted: %r follows %r" % (v, prev))
        deltas.append(v - prev)
        prev = v
    return encode_gaps(deltas)


def decode_sorted_tape(bits, count):
    """
    Inverse of encode_sorted_tape. Returns a fresh rewound Tape holding
    the first count values, with its write counter at zero.
    """
    values = []
    total = 0
    for d in decode_gaps(bits, count):
        total += d
        values.append(total)
    return Tape(values)
