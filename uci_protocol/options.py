"""
Descriptors for engine-tunable settings, announced with `option` messages.

Which fields matter depends on the option type:

    check   default ("true" / "false")
    spin    default, min, max
    combo   default, var (the allowed values)
    button  nothing but the name
    string  default

Use the new_* constructors rather than filling every field by hand; they
leave the fields a type does not use at their neutral values.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from uci_protocol.constants import I64_MAX, I64_MIN

Int64 = Annotated[int, Field(ge=I64_MIN, le=I64_MAX)]


class OptionType(str, Enum):
    """UCI option types, valued by their wire keyword."""

    CHECK = "check"
    SPIN = "spin"
    COMBO = "combo"
    BUTTON = "button"
    STRING = "string"


class OptionMsg(BaseModel):
    """
    An option the engine supports.

    Fields:
        id:          The option name shown to the user.
        option_type: The kind of control the GUI should present.
        default:     Default value as rendered on the wire. Unused by buttons.
        min:         Lower bound of a spin option.
        max:         Upper bound of a spin option.
        var:         Allowed values of a combo option, in display order.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    option_type: OptionType
    default: str = ""
    min: Int64 = 0
    max: Int64 = 0
    var: list[str] = Field(default_factory=list)

    @classmethod
    def new_check(cls, id: str, default: bool) -> "OptionMsg":
        """A boolean option, e.g. `UCI_AnalyseMode`."""
        return cls(id=id, option_type=OptionType.CHECK, default="true" if default else "false")

    @classmethod
    def new_spin(cls, id: str, default: int | str, min: int, max: int) -> "OptionMsg":
        """An integer option in the range [min, max], e.g. `Hash`."""
        return cls(id=id, option_type=OptionType.SPIN, default=str(default), min=min, max=max)

    @classmethod
    def new_combo(cls, id: str, default: str, var: list[str]) -> "OptionMsg":
        """An option chosen from a fixed list of values."""
        return cls(id=id, option_type=OptionType.COMBO, default=default, var=list(var))

    @classmethod
    def new_button(cls, id: str) -> "OptionMsg":
        """An action without a value, e.g. `Clear Hash`."""
        return cls(id=id, option_type=OptionType.BUTTON)

    @classmethod
    def new_string(cls, id: str, default: str) -> "OptionMsg":
        """A free text option."""
        return cls(id=id, option_type=OptionType.STRING, default=default)

    @property
    def has_default(self) -> bool:
        return self.option_type is not OptionType.BUTTON

    @property
    def has_range(self) -> bool:
        return self.option_type is OptionType.SPIN and self.min != self.max

    @property
    def has_var(self) -> bool:
        return self.option_type is OptionType.COMBO and bool(self.var)


new_check = OptionMsg.new_check
new_spin = OptionMsg.new_spin
new_combo = OptionMsg.new_combo
new_button = OptionMsg.new_button
new_string = OptionMsg.new_string
