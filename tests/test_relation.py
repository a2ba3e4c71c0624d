# -*- coding: utf-8 -*-

"""Test the relation table."""

import unittest

from graphoid.cube import Cube
from graphoid.relation import Relation
from graphoid.struct import SeparationJudgement


class TestRelation(unittest.TestCase):
    """Test the relation table."""

    def setUp(self) -> None:
        """Set up the test case."""
        self.cube = Cube.from_size(3)

    def test_default(self):
        """Test the table is pre-filled."""
        relation = Relation(self.cube)
        self.assertEqual(6, len(relation))
        self.assertEqual(6, relation.count())
        self.assertEqual("000000", relation.to_str())
        self.assertEqual(0, Relation(self.cube, default=False).count())

    def test_addressing(self):
        """Test entries can be addressed by offset or by square."""
        relation = Relation(self.cube)
        relation[(2, 1), [3]] = False
        self.assertFalse(relation[1])
        self.assertFalse(relation[(1, 2), (3,)])
        self.assertTrue(relation[(1, 2), ()])
        relation[5] = False
        self.assertFalse(relation[(3, 2), {1}])
        self.assertEqual("010001", relation.to_str())
        with self.assertRaises(IndexError):
            relation[6]
        with self.assertRaises(ValueError):
            relation[(1, 2), [1]] = True

    def test_from_str(self):
        """Test parsing a relation string."""
        relation = Relation.from_str(self.cube, "010001")
        self.assertEqual("010001", relation.to_str())
        self.assertEqual(4, relation.count())
        self.assertNotEqual(Relation(self.cube), relation)
        self.assertEqual(Relation.from_str(self.cube, "010001"), relation)
        self.assertNotEqual(Relation(Cube([3, 2, 1])), Relation(self.cube))
        with self.assertRaises(ValueError):
            Relation.from_str(self.cube, "0100")
        with self.assertRaises(ValueError):
            Relation.from_str(self.cube, "0100x1")

    def test_judgements(self):
        """Test listing judgements."""
        relation = Relation.from_str(self.cube, "110111")
        self.assertEqual(
            [SeparationJudgement(True, 1, 3, ())],
            list(relation.independencies()),
        )
        judgements = list(relation.judgements())
        self.assertEqual(6, len(judgements))
        self.assertEqual(SeparationJudgement(False, 2, 3, (1,)), judgements[5])
