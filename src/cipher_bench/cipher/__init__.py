"""Cipher capability interface, generic modes and built-in ciphers."""

from .base import (
    AEADContext as AEADContext,
)
from .base import (
    AEADMode as AEADMode,
)
from .base import (
    BlockCipher as BlockCipher,
)
from .base import (
    KeySize as KeySize,
)
from .catalog import (
    CipherCatalog as CipherCatalog,
)
from .catalog import (
    synthesize_key as synthesize_key,
)
from .openssl import (
    AES128 as AES128,
)
from .openssl import (
    AES192 as AES192,
)
from .openssl import (
    AES256 as AES256,
)
from .openssl import (
    SM4 as SM4,
)
from .openssl import (
    Camellia128 as Camellia128,
)
from .openssl import (
    Camellia192 as Camellia192,
)
from .openssl import (
    Camellia256 as Camellia256,
)
from .openssl import (
    OpenSSLBlockCipher as OpenSSLBlockCipher,
)
from .openssl import (
    available_ciphers as available_ciphers,
)
