__version__ = "0.1.0"


from ._codecs import BOOL as BOOL
from ._codecs import FLOAT as FLOAT
from ._codecs import INT as INT
from ._codecs import STRING as STRING
from ._codecs import ElementCodec as ElementCodec
from ._errors import FlagError as FlagError
from ._errors import FlagLookupError as FlagLookupError
from ._errors import FlagNotFoundError as FlagNotFoundError
from ._errors import FlagRedefinedError as FlagRedefinedError
from ._errors import FlagTypeError as FlagTypeError
from ._errors import InvalidValueError as InvalidValueError
from ._errors import MissingFlagValueError as MissingFlagValueError
from ._errors import ParseError as ParseError
from ._errors import TokenDecodeError as TokenDecodeError
from ._errors import UnbalancedQuoteError as UnbalancedQuoteError
from ._errors import UnknownFlagError as UnknownFlagError
from ._flagset import ErrorHandling as ErrorHandling
from ._flagset import Flag as Flag
from ._flagset import FlagSet as FlagSet
from ._settings import options as options
from ._strings import join_tokens as join_tokens
from ._strings import split_tokens as split_tokens
from ._values import SliceValue as SliceValue
from ._values import SliceValueProtocol as SliceValueProtocol
from ._values import Value as Value
from ._values import bool_slice_value as bool_slice_value
from ._values import float_slice_value as float_slice_value
from ._values import int_slice_value as int_slice_value
from ._values import string_slice_value as string_slice_value
from ._warnings import FlagSliceDeprecationWarning as FlagSliceDeprecationWarning
from ._warnings import FlagSliceWarning as FlagSliceWarning
