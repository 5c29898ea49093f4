from __future__ import annotations

import logging
import unittest

from tezos_rpc_smoke.config import DEFAULT_TIMEOUT_S, SmokeConfig
from tezos_rpc_smoke.errors import UsageError
from tezos_rpc_smoke.logging_config import setup_logging


class TestSmokeConfig(unittest.TestCase):
    def test_from_env_defaults(self) -> None:
        config = SmokeConfig.from_env({}, base_url="http://node.example", chain="main")
        self.assertEqual(config.base_url, "http://node.example")
        self.assertEqual(config.chain, "main")
        self.assertIsNone(config.auth_token)
        self.assertEqual(config.timeout_s, DEFAULT_TIMEOUT_S)
        self.assertEqual(config.log_level, "INFO")

    def test_from_env_reads_overrides(self) -> None:
        config = SmokeConfig.from_env(
            {"TEZOS_SMOKE_TIMEOUT": "2.5", "TEZOS_SMOKE_LOG_LEVEL": "warning"},
            base_url="http://node.example",
            chain="main",
            auth_token="tok123",
        )
        self.assertEqual(config.timeout_s, 2.5)
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(config.auth_token, "tok123")

    def test_explicit_values_beat_env(self) -> None:
        config = SmokeConfig.from_env(
            {"TEZOS_SMOKE_TIMEOUT": "2.5"},
            base_url="http://node.example",
            chain="main",
            timeout_s=9.0,
        )
        self.assertEqual(config.timeout_s, 9.0)

    def test_empty_auth_token_is_none(self) -> None:
        config = SmokeConfig.from_env({}, base_url="http://node.example", chain="main", auth_token="")
        self.assertIsNone(config.auth_token)

    def test_invalid_values_raise(self) -> None:
        cases = [
            ({"TEZOS_SMOKE_TIMEOUT": "soon"}, {}),
            ({"TEZOS_SMOKE_TIMEOUT": "-1"}, {}),
            ({"TEZOS_SMOKE_LOG_LEVEL": "loud"}, {}),
            ({}, {"base_url": " "}),
            ({}, {"chain": ""}),
        ]
        for env, overrides in cases:
            with self.subTest(env=env, overrides=overrides):
                kwargs = {"base_url": "http://node.example", "chain": "main", **overrides}
                with self.assertRaises(UsageError):
                    SmokeConfig.from_env(env, **kwargs)

    def test_config_is_immutable(self) -> None:
        config = SmokeConfig(base_url="http://node.example", chain="main")
        with self.assertRaises(AttributeError):
            config.chain = "test"  # type: ignore[misc]


class TestSetupLogging(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def test_setup_logging_sets_level_and_format(self) -> None:
        setup_logging("debug")
        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        formatter = root.handlers[0].formatter
        self.assertEqual(formatter._fmt, "%(asctime)s %(message)s")
        self.assertEqual(formatter.datefmt, "%Y/%m/%d %H:%M:%S")


if __name__ == "__main__":
    unittest.main()
