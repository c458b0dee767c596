"""sdper - validated SDP (RFC 4566) field model and attribute codec

Public API:
  - validated newtypes: Username, SessionName, BandwidthType, ExtensionId, ...
  - field models: Origin, Connection, Timing, RepeatTime, TimeZone,
    bandwidth variants, encryption key variants
  - attribute codec: unmarshal_line / marshal_line, Attribute,
    parse_attribute_line
  - ExtMap: the extmap attribute parser/serializer
"""

from .attribute import (
    ATTRIBUTE_KEY,
    END_LINE,
    Attribute,
    marshal_line,
    parse_attribute_line,
    unmarshal_line,
)
from .bandwidth import (
    ApplicationSpecific,
    Bandwidth,
    BandwidthType,
    BandwidthValue,
    ConferenceTotal,
    CustomBandwidth,
    TransportIndependentAppSpecific,
    parse_bandwidth,
)
from .connection import AddressType, Connection, FqdnAddress, IpAddress, parse_address
from .contact import Email, Phone, Uri
from .encryption import Base64Key, ClearKey, EncryptionKey, PromptKey, UriKey, parse_key
from .extmap import Direction, ExtensionId, ExtMap
from .origin import Origin, SessionId, SessionVersion, Username
from .session import SessionInformation, SessionName
from .timing import Duration, Offset, RepeatTime, Time, TimeZone, Timing, TimingDescription
from .exceptions import *

__all__ = [
    # codec
    "ATTRIBUTE_KEY", "END_LINE", "Attribute", "marshal_line", "parse_attribute_line", "unmarshal_line",
    # fields
    "Origin", "SessionId", "SessionVersion", "Username",
    "SessionName", "SessionInformation", "Email", "Phone", "Uri",
    "AddressType", "Connection", "FqdnAddress", "IpAddress", "parse_address",
    "Bandwidth", "ApplicationSpecific", "ConferenceTotal", "TransportIndependentAppSpecific",
    "CustomBandwidth", "BandwidthType", "BandwidthValue", "parse_bandwidth",
    "ClearKey", "Base64Key", "UriKey", "PromptKey", "EncryptionKey", "parse_key",
    "Time", "Duration", "Offset", "Timing", "RepeatTime", "TimeZone", "TimingDescription",
    # extmap
    "ExtMap", "ExtensionId", "Direction",
    # exceptions
    "SDPError", "SDPValidationError", "SDPCodecError", "SDPParseError",
    "InvalidUsernameError", "InvalidSessionNameError", "InvalidBandwidthTypeError",
    "InvalidNumberError", "InvalidTextError", "InvalidUriError", "InvalidAddressError",
    "InvalidKeyError", "MissingPrefixError", "MissingTerminatorError", "MalformedLineError",
    "ExtMapError", "MalformedExtMapError", "InvalidExtensionIdError", "InvalidDirectionError",
    "ExtMapUriError",
]
