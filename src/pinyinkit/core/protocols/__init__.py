from .syllable import SyllableKind, SyllableProtocol

__all__ = ["SyllableKind", "SyllableProtocol"]
