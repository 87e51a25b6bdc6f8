# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Smallest-unit ⇄ display-decimal conversion for ledger token amounts.

On-ledger amounts are unsigned integers in the token's smallest unit.
Conversion uses :class:`~decimal.Decimal` so display strings are exact at
every precision a token can declare.
"""
from __future__ import annotations

from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field

from ghostspeak_engine.errors import InvalidAmountError
from ghostspeak_engine.types import MAX_UNITS


class PaymentToken(str, Enum):
    """Tokens the marketplace program accepts for escrow and staking."""

    SOL = "SOL"
    USDC = "USDC"
    USDT = "USDT"
    GHOST = "GHOST"


class TokenInfo(BaseModel, frozen=True):
    """
    Display metadata for a token.

    Attributes:
        symbol: Ticker shown next to amounts.
        decimals: Exponent between the smallest unit and one whole token.
        mint: On-ledger mint address, when known.
    """

    symbol: str = Field(..., min_length=1)
    decimals: Annotated[int, Field(ge=0, le=18)]
    mint: str | None = None


_TOKENS: dict[PaymentToken, TokenInfo] = {
    PaymentToken.SOL: TokenInfo(
        symbol="SOL",
        decimals=9,
        mint="So11111111111111111111111111111111111111112",
    ),
    PaymentToken.USDC: TokenInfo(
        symbol="USDC",
        decimals=6,
        mint="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    ),
    PaymentToken.USDT: TokenInfo(
        symbol="USDT",
        decimals=6,
        mint="Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB",
    ),
    PaymentToken.GHOST: TokenInfo(
        symbol="GHOST",
        decimals=6,
        mint="DFQ9ejBt1T192Xnru1J21bFq9FSU7gjRRYJkehvpump",
    ),
}


def token_info(token: PaymentToken | str) -> TokenInfo:
    """
    Return the registered metadata for ``token``.

    Raises:
        ValueError: If ``token`` is not a known :class:`PaymentToken`.
    """
    return _TOKENS[PaymentToken(token)]


# u64 amounts at 18 decimals need more than the default 28 significant digits.
_CONTEXT = Context(prec=60)

_MAX_UNITS_DIGITS = len(str(MAX_UNITS))


def _scale(decimals: int) -> Decimal:
    return Decimal(10) ** decimals


def to_display_amount(amount: int, decimals: int) -> Decimal:
    """Convert a smallest-unit amount to a Decimal with exactly ``decimals`` places."""
    quantum = Decimal(1).scaleb(-decimals)
    value = _CONTEXT.divide(Decimal(amount), _scale(decimals))
    return value.quantize(quantum, context=_CONTEXT)


def to_smallest_unit(value: Decimal | int | str, decimals: int) -> int:
    """Convert a display value to smallest units, truncating excess precision."""
    scaled = _CONTEXT.multiply(Decimal(value), _scale(decimals))
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def format_amount(amount: int, token: TokenInfo) -> str:
    """
    Render ``amount`` at the token's full precision followed by its symbol.

    ``format_amount(1_500_000, token_info("USDC"))`` gives ``"1.500000 USDC"``.
    """
    return f"{to_display_amount(amount, token.decimals):f} {token.symbol}"


def parse_amount(text: str, decimals: int) -> int:
    """
    Parse a human-entered amount into smallest units.

    Digits beyond the token's precision are dropped, never rounded up.

    Raises:
        InvalidAmountError: If ``text`` is not a finite number, if it is
            not positive once truncated to the token's precision, or if it
            exceeds :data:`MAX_UNITS` smallest units.
    """
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise InvalidAmountError(str(text), "not a number") from exc
    if not value.is_finite():
        raise InvalidAmountError(text, "not a finite number")
    if value <= 0:
        raise InvalidAmountError(text, "amount must be greater than zero")
    # More integer digits than MAX_UNITS is out of range at every precision;
    # checked before scaling so huge exponents never reach int().
    if value.adjusted() >= _MAX_UNITS_DIGITS:
        raise InvalidAmountError(text, "amount exceeds the largest ledger amount")
    units = to_smallest_unit(value, decimals)
    if units <= 0:
        raise InvalidAmountError(text, "amount must be greater than zero")
    if units > MAX_UNITS:
        raise InvalidAmountError(text, "amount exceeds the largest ledger amount")
    return units
