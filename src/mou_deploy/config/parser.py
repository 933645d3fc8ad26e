"""Decoding of raw configuration inputs.

Inputs arrive as free text and may be written as JSON or YAML. Decoders
are tried in order and the first one that succeeds wins.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import yaml
from loguru import logger

from mou_deploy.errors import ParseError

Decoder = Callable[[str], Any]

# Order matters: every JSON document is also valid YAML
DECODERS: tuple[tuple[str, Decoder], ...] = (
    ("json", json.loads),
    ("yaml", yaml.safe_load),
)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a single decoder attempt.

    Attributes:
        format: Name of the decoder ("json" or "yaml")
        value: Decoded value when the attempt succeeded
        error: Decoder exception when the attempt failed
    """

    format: str
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode(
    raw: str, decoders: tuple[tuple[str, Decoder], ...] = DECODERS
) -> DecodeResult:
    """Run decoders in order, stopping at the first success.

    Returns:
        The first successful DecodeResult, or the last failed one if
        every decoder rejected the input
    """
    failed = DecodeResult(format="none", error=ValueError("no decoders"))
    for name, decoder in decoders:
        try:
            value = decoder(raw)
        except (ValueError, yaml.YAMLError) as e:
            logger.debug(f"Config is not valid {name}: {e}")
            failed = DecodeResult(format=name, error=e)
            continue
        return DecodeResult(format=name, value=value)
    return failed


def parse_config(raw: str) -> dict[str, Any]:
    """Parse a JSON or YAML document into a mapping.

    Args:
        raw: Raw input text

    Returns:
        The decoded mapping

    Raises:
        ParseError: If no decoder accepts the input, or the decoded value
                    is not a mapping (empty input, scalar, list)
    """
    logger.debug(f"Parsing raw config '{raw}'...")
    result = decode(raw)
    if not result.ok:
        raise ParseError(f"Unable to parse config. Found content: {raw}", content=raw)

    # An empty mapping is accepted here and rejected by validation
    if not isinstance(result.value, Mapping):
        raise ParseError(
            f'Unable to load config "{result.value}" into an object.',
            content=raw,
        )

    logger.debug(f"Config decoded as {result.format}")
    return dict(result.value)
