from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Token:
    symbol: str
    decimals: int
    address: str


@dataclass(frozen=True)
class Pool:
    dex_name: str
    chain: str
    token0: str
    token1: str
    reserve0: int
    reserve1: int
    fee: int
    id: str | None = None
    factory: str | None = None

    def __post_init__(self) -> None:
        if self.reserve0 < 0 or self.reserve1 < 0:
            raise ValueError("Pool reserves must be >= 0.")
        if self.fee < 0:
            raise ValueError("Pool fee must be >= 0.")


@dataclass(frozen=True)
class DexData:
    tokens: list[Token] = field(default_factory=list)
    pools: list[Pool] = field(default_factory=list)
