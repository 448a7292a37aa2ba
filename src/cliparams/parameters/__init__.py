"""Parameter system for cliparams.

This package provides the typed parameter store shared by the command-line
parser, the ini codec and the manifest generator: value codecs, the closed
set of kinds, records, the registry and declaration handles.
"""

from .codec import ValueCodec
from .kinds import Kind
from .record import ParamRecord
from .registry import ParameterRegistry
from .handle import ParamHandle, declare_param

__all__ = [
    # Values
    "ValueCodec",
    "Kind",
    # Storage
    "ParamRecord",
    "ParameterRegistry",
    # Declaration
    "ParamHandle",
    "declare_param",
]
