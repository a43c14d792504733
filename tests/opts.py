import argparse
import unittest

from intpoly import opts

flag   = opts.Option("test-flag", bool, False, description="a flag")
noflag = opts.Option("test-enabled", bool, True)
count  = opts.Option("test-count", int, 7, metavar="N")
label  = opts.Option("test-label", str, "p")

def parse(*argv):
    parser = argparse.ArgumentParser()
    opts.setup(parser)
    opts.read(parser.parse_args(list(argv)))

class TestOpts(unittest.TestCase):

    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def test_defaults(self):
        parse()
        self.assertIs(flag.value, False)
        self.assertIs(noflag.value, True)
        self.assertEqual(count.value, 7)
        self.assertEqual(label.value, "p")

    def test_flags(self):
        parse("--test-flag", "--no-test-enabled", "--test-count", "12", "--test-label", "q")
        self.assertIs(flag.value, True)
        self.assertIs(noflag.value, False)
        self.assertEqual(count.value, 12)
        self.assertEqual(label.value, "q")

    def test_argname(self):
        self.assertEqual(flag.argname, "test-flag")
        self.assertEqual(noflag.argname, "no-test-enabled")
        self.assertEqual(noflag.dest, "no_test_enabled")

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        count.value = 99
        opts.restore(snap)
        self.assertEqual(count.value, 7)

    def test_no_implicit_bool(self):
        with self.assertRaises(Exception):
            if flag:
                pass
