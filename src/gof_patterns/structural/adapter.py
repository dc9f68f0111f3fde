"""Adapter.

An adapter implements the interface client code expects by translating
each call into calls on an object with an incompatible interface.
"""

from typing import Callable, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class Target:
    """The domain-specific interface used by client code."""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """Useful behavior behind an interface client code cannot use."""

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    """Makes the Adaptee usable wherever a Target is expected."""

    def __init__(self, adaptee: Adaptee):
        self._adaptee = adaptee

    def request(self) -> str:
        result = self._adaptee.specific_request()[::-1]
        return f"Adapter: (TRANSLATED) {result}"


def client_code(target: Target, console: ConsolePort) -> None:
    console.write_line(target.request())


# === Documents ==================================================================


class SpanishDocument:
    """Target: the interface the Spanish-speaking client works with."""

    def obtener_documento(self) -> str:
        return "Este es el contenido del documento."


class EnglishDocument:
    """Adaptee: same kind of content, different language and interface."""

    def get_document(self) -> str:
        return "This is the content of the document."


def translate_to_spanish(english_content: str) -> str:
    return "Los contenidos del documento en inglés han sido traducidos al español"


class TranslatedSpanishDocument(SpanishDocument):
    """Presents an EnglishDocument as a SpanishDocument."""

    def __init__(
        self,
        original: EnglishDocument,
        translator: Callable[[str], str] = translate_to_spanish,
    ):
        self._original = original
        self._translator = translator

    def obtener_documento(self) -> str:
        resultado = self._translator(self._original.get_document())
        return f"Documento traducido: {resultado}"


def spanish_client_code(document: SpanishDocument, console: ConsolePort) -> None:
    console.write_line(document.obtener_documento())


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    console.write_line("Client: I can work just fine with the Target objects:")
    client_code(Target(), console)
    console.write_line()

    adaptee = Adaptee()
    console.write_line("Client: The Adaptee class has a weird interface. See, I don't understand it:")
    console.write_line(f"Adaptee: {adaptee.specific_request()}")
    console.write_line()

    console.write_line("Client: But I can work with it via the Adapter:")
    client_code(Adapter(adaptee), console)
    console.write_line()

    spanish_client_code(SpanishDocument(), console)
    spanish_client_code(TranslatedSpanishDocument(EnglishDocument()), console)
