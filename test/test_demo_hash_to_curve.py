import os
import sys

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import unittest

from demos.demo_hash_to_curve import suite1


class HashToCurve(unittest.TestCase):
    def test_suite1(self):
        verification = suite1()
        self.assertEqual(verification, True)


if __name__ == "__main__":
    unittest.main()
