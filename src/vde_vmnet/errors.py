"""
Error types raised while turning the command line into a VmnetConfig
"""


class VmnetCLIError(ValueError):
    """Base class for fatal command-line errors"""


class ParseError(VmnetCLIError):
    """Malformed or unknown arguments, bad UUID, wrong positional count"""


class ValidationError(VmnetCLIError):
    """Options that parse individually but do not form a usable configuration"""
