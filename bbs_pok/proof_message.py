"""
Disclosure policy of a message inside a proof.

A closed set of variants:

    ProofMessage
    ├── RevealedMessage                 value sent in the clear
    └── HiddenMessage
        ├── ProofSpecificBlinding       fresh blinding chosen by the prover
        └── ExternalBlinding            blinding supplied by the caller

Code that dispatches on a ProofMessage must handle every leaf and raise
TypeError for anything else.
"""

from .scalars import Message, Nonce


class ProofMessage:
    """Base of the disclosure variants. Not instantiated directly."""

    __slots__ = ('message',)

    def __init__(self, message: Message):
        if type(self) in (ProofMessage, HiddenMessage):
            raise TypeError(f"{type(self).__name__} is abstract")
        if not isinstance(message, Message):
            raise TypeError(f"expected Message, got {type(message).__name__}")
        self.message = message

    @property
    def is_revealed(self) -> bool:
        return isinstance(self, RevealedMessage)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash((type(self).__name__, self.message))

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"


class RevealedMessage(ProofMessage):
    __slots__ = ()


class HiddenMessage(ProofMessage):
    __slots__ = ()


class ProofSpecificBlinding(HiddenMessage):
    """Hidden; the prover samples a blinding used only in this proof."""

    __slots__ = ()


class ExternalBlinding(HiddenMessage):
    """
    Hidden, with a caller-supplied blinding.

    Proving the same message with the same blinding under the same
    challenge in another commitment yields the same response, which links
    the two without revealing the value.
    """

    __slots__ = ('blinding',)

    def __init__(self, message: Message, blinding: Nonce):
        super().__init__(message)
        if not isinstance(blinding, Nonce):
            raise TypeError(f"expected Nonce blinding, got {type(blinding).__name__}")
        self.blinding = blinding

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.blinding == other.blinding

    def __hash__(self):
        return hash((type(self).__name__, self.message, self.blinding))
