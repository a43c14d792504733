import itertools
import os
import tempfile
import unittest
from unittest import mock

from intpoly.common import (
    check_type, typechecked,
    FrozenDict, AtomicWriteableFile, open_maybe_stdout)

def read_file(path):
    with open(path) as f:
        return f.read()

@typechecked
def scale(xs : [int], k : int) -> [int]:
    return [x * k for x in xs]

class TestCommonUtils(unittest.TestCase):

    def test_frozendict_unordered(self):
        d1 = FrozenDict([(3, 4), (0, 1)])
        d2 = FrozenDict([(0, 1), (3, 4)])
        assert hash(d1) == hash(d2)
        assert d1 == d2

    def test_frozendict_sortable(self):
        d1 = FrozenDict([(0, 1)])
        d2 = FrozenDict([(1, 1)])
        assert (d1 < d2) != (d1 > d2)
        assert d1 <= d1

    def test_frozendict_repr(self):
        for items in itertools.permutations([(2, 1), (0, -5)]):
            d = FrozenDict(items)
            assert eval(repr(d)) == d

    def test_check_type(self):
        check_type(3, int)
        check_type([1, 2], [int])
        check_type("anything", None)
        with self.assertRaises(AssertionError):
            check_type("3", int)
        with self.assertRaises(AssertionError):
            check_type([1, "2"], [int])
        with self.assertRaises(AssertionError):
            check_type((1, 2), [int])

    def test_typechecked(self):
        self.assertEqual(scale([1, 2], 3), [3, 6])
        self.assertEqual(scale(xs=[1], k=2), [2])
        with self.assertRaises(AssertionError):
            scale([1, 2], "3")
        with self.assertRaises(AssertionError):
            scale(xs=(1, 2), k=3)

    def test_atomic_writeable_file(self):
        fd, path = tempfile.mkstemp(text=True)
        with os.fdopen(fd, "w") as f:
            f.write("contents0")

        # (1) normal writing works
        with AtomicWriteableFile(path) as f:
            f.write("contents1")
        assert read_file(path) == "contents1"

        # (2) if an error happens, no writing happens
        class CustomExc(Exception):
            pass
        temp_paths = []
        real_mkstemp = tempfile.mkstemp
        def recording_mkstemp(*args, **kwargs):
            fd, tmp = real_mkstemp(*args, **kwargs)
            temp_paths.append(tmp)
            return fd, tmp
        try:
            with mock.patch("tempfile.mkstemp", recording_mkstemp):
                with AtomicWriteableFile(path) as f:
                    f.write("con")
                    raise CustomExc()
        except CustomExc:
            pass
        assert read_file(path) == "contents1"

        # (3) ...and the temporary file is cleaned up
        self.assertEqual(len(temp_paths), 1)
        self.assertFalse(os.path.exists(temp_paths[0]))
        os.remove(path)

    def test_open_maybe_stdout_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.txt")
            with open_maybe_stdout(path) as f:
                f.write("1x^2")
            self.assertEqual(read_file(path), "1x^2")
