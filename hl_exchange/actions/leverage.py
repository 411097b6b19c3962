"""Update-leverage action."""

from dataclasses import dataclass
from typing import Optional

from hl_exchange.encoding.wire import WireField, WireRecord

UPDATE_LEVERAGE_ACTION_TYPE = "updateLeverage"


@dataclass(frozen=True)
class UpdateLeverageAction(WireRecord):
    """
    Set leverage for one asset.

    ``is_cross`` selects cross (True) or isolated (False) margin; ``leverage``
    is an integer subject to the asset's exchange-side maximum.
    """

    type: Optional[str] = UPDATE_LEVERAGE_ACTION_TYPE
    asset: Optional[int] = None
    is_cross: Optional[bool] = None
    leverage: Optional[int] = None

    WIRE_FIELDS = (
        WireField("type", "type"),
        WireField("asset", "asset"),
        WireField("is_cross", "isCross"),
        WireField("leverage", "leverage"),
    )
