"""
FIX Protocol Codes and Constants

Defines:
- FIX versions and their reference dictionary path segments
- Standard header and trailer tag sets
"""

from enum import Enum
from typing import FrozenSet, Optional


class FixVersion(Enum):
    """FIX Protocol versions."""

    FIX_4_0 = ("FIX.4.0", "FIX 4.0", "4.0")
    FIX_4_1 = ("FIX.4.1", "FIX 4.1", "4.1")
    FIX_4_2 = ("FIX.4.2", "FIX 4.2", "4.2")
    FIX_4_3 = ("FIX.4.3", "FIX 4.3", "4.3")
    FIX_4_4 = ("FIX.4.4", "FIX 4.4", "4.4")
    FIX_5_0 = ("FIX.5.0", "FIX 5.0", "5.0")
    FIX_5_0_SP1 = ("FIX.5.0SP1", "FIX 5.0 SP1", "5.0.sp1")
    FIX_5_0_SP2 = ("FIX.5.0SP2", "FIX 5.0 SP2", "5.0.sp2")
    FIXT_1_1 = ("FIXT.1.1", "FIXT 1.1", "fixt1.1")

    def __init__(self, begin_string: str, description: str, reference_path: str):
        self._begin_string = begin_string
        self._description = description
        self._reference_path = reference_path

    @property
    def begin_string(self) -> str:
        return self._begin_string

    @property
    def description(self) -> str:
        """Human readable name, used as the version dropdown title."""
        return self._description

    @property
    def reference_path(self) -> str:
        """Path segment used by the OnixS FIX dictionary."""
        return self._reference_path

    @classmethod
    def from_string(cls, value: str) -> Optional["FixVersion"]:
        """Get version from BeginString value."""
        for version in cls:
            if version.begin_string == value:
                return version
        return None


def version_title(version_id: str) -> str:
    """Get the display title of a version id, or the id itself when unknown."""
    version = FixVersion.from_string(version_id)
    return version.description if version is not None else version_id


def reference_path_for(version_id: str) -> str:
    """
    Get the reference dictionary path segment for a version id.

    Unknown ids are mapped by dropping the ``FIX.`` prefix and lowercasing,
    with service packs written as ``.spN``.
    """
    version = FixVersion.from_string(version_id)
    if version is not None:
        return version.reference_path

    path = version_id
    if path.upper().startswith("FIX."):
        path = path[4:]
    path = path.lower()
    if "sp" in path and ".sp" not in path:
        path = path.replace("sp", ".sp", 1)
    return path


# Standard Header
HEADER_TAGS: FrozenSet[int] = frozenset(
    {
        8,  # BeginString
        9,  # BodyLength
        35,  # MsgType
        49,  # SenderCompID
        56,  # TargetCompID
        34,  # MsgSeqNum
        52,  # SendingTime
        43,  # PossDupFlag
        97,  # PossResend
        122,  # OrigSendingTime
        115,  # OnBehalfOfCompID
        128,  # DeliverToCompID
        50,  # SenderSubID
        57,  # TargetSubID
        90,  # SecureDataLen
        91,  # SecureData
        347,  # MessageEncoding
        369,  # LastMsgSeqNumProcessed
        627,  # NoHops
        1128,  # ApplVerID
        1129,  # CstmApplVerID
    }
)

# Standard Trailer
TRAILER_TAGS: FrozenSet[int] = frozenset(
    {
        10,  # CheckSum
        89,  # Signature
        93,  # SignatureLength
    }
)
