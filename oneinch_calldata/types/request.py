"""
Quote request definition
"""

from dataclasses import dataclass
from typing import Dict, Sequence

from ..errors import ConfigurationError


@dataclass(frozen=True)
class QuoteRequest:
    """
    Parameters of a single 1inch swap calldata request

    Attributes:
        chain_id: EVM chain ID as sent in the URL path (e.g. "1")
        from_address: Sender of the swap
        to_address: Receiver of the swapped tokens
        from_asset: Source token address
        to_asset: Destination token address
        from_amount: Amount in the source token's smallest units, as a decimal string
    """
    chain_id: str
    from_address: str
    to_address: str
    from_asset: str
    to_asset: str
    from_amount: str

    FIELD_ORDER = (
        "chain_id",
        "from_address",
        "to_address",
        "from_asset",
        "to_asset",
        "from_amount",
    )

    def __post_init__(self):
        if not str(self.from_amount).isdigit():
            raise ConfigurationError.invalid(
                "from_amount", f"expected a decimal integer string, got {self.from_amount!r}"
            )

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "QuoteRequest":
        """Build from positional invocation parameters (order-sensitive)"""
        if len(args) != len(cls.FIELD_ORDER):
            raise ConfigurationError.invalid(
                "arguments",
                f"expected {len(cls.FIELD_ORDER)} positional values "
                f"({', '.join(cls.FIELD_ORDER)}), got {len(args)}",
            )
        return cls(*(str(arg) for arg in args))

    def to_swap_params(self, slippage: float = 1) -> Dict[str, str]:
        """Query parameters for the /swap endpoint"""
        return {
            "src": self.from_asset,
            "dst": self.to_asset,
            "amount": str(self.from_amount),
            "fromAddress": self.from_address,
            "receiver": self.to_address,
            "slippage": str(slippage),
            "disableEstimate": "true",
            "allowPartialFill": "false",
        }

    def __str__(self) -> str:
        return f"{self.from_amount} {self.from_asset} -> {self.to_asset} on chain {self.chain_id}"
