"""Unit tests for extra field hooks."""

import unittest
from unittest.mock import MagicMock

from feedextractor.hooks import apply_hook


class TestApplyHook(unittest.TestCase):
    def test_no_hook(self):
        canonical = {"title": "t"}
        self.assertEqual(apply_hook(canonical, None, {"raw": 1}), {"title": "t"})

    def test_hook_receives_raw_node_and_merges(self):
        raw = {"author": "Jane", "title": "raw title"}
        hook = MagicMock(return_value={"author": "Jane"})
        result = apply_hook({"title": "t"}, hook, raw)
        hook.assert_called_once_with(raw)
        self.assertEqual(result, {"title": "t", "author": "Jane"})

    def test_hook_keys_overwrite_canonical_keys(self):
        result = apply_hook({"id": "canonical"}, lambda raw: {"id": raw["guid"]}, {"guid": "g"})
        self.assertEqual(result["id"], "g")

    def test_none_return_adds_nothing(self):
        self.assertEqual(apply_hook({"a": "b"}, lambda raw: None, {}), {"a": "b"})

    def test_non_mapping_return(self):
        with self.assertRaises(TypeError):
            apply_hook({}, lambda raw: ["author"], {})

    def test_exceptions_propagate_unmodified(self):
        error = KeyError("boom")

        def hook(raw):
            raise error

        with self.assertRaises(KeyError) as ctx:
            apply_hook({}, hook, {})
        self.assertIs(ctx.exception, error)


if __name__ == "__main__":
    unittest.main()
