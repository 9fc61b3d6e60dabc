# SPDX-License-Identifier: MIT
"""Setup steps checked before a project can be generated.

- UpPrecondition: a requirement the user has to fulfil (advice on failure)
- UpCustom: a probe command plus a command that satisfies it
"""

from pgen.up.base import CheckOutcome, OutcomeKind, UpRequired
from pgen.up.custom import UpCustom
from pgen.up.errors import (
    CommandFailed,
    InvalidConfiguration,
    MissingOrInvalidField,
    PreconditionUnfulfilled,
    UpConfigurationError,
    UpError,
)
from pgen.up.loader import STEP_TYPES, StepDecodeError, load_steps, up_from_dict
from pgen.up.precondition import UpPrecondition

__all__ = [
    # Interface
    "CheckOutcome",
    "OutcomeKind",
    "UpRequired",
    # Steps
    "UpCustom",
    "UpPrecondition",
    # Errors
    "CommandFailed",
    "InvalidConfiguration",
    "MissingOrInvalidField",
    "PreconditionUnfulfilled",
    "UpConfigurationError",
    "UpError",
    # Decoding
    "STEP_TYPES",
    "StepDecodeError",
    "load_steps",
    "up_from_dict",
]
