"""Playground Handler."""

from returns.result import Failure, Success

from uiengine.core import get_logger
from uiengine.runtime import ActionDispatcher, ReportLog, Session
from uiengine.schema import DocumentLoader
from uiengine.templates import TEMPLATES, template_text

logger = get_logger(__name__)


class PlaygroundHandler:
    """
    Host side of an editor/preview pair.

    Takes raw JSON text, keeps either a mounted session or the list of
    validation errors, and retains the reports of the current document.
    Reports are cleared whenever the text changes.
    """

    def __init__(self, loader: DocumentLoader, dispatcher: ActionDispatcher) -> None:
        self.loader = loader
        self.dispatcher = dispatcher
        self.reports = ReportLog()
        self.text: str | None = None
        self.session: Session | None = None
        self.errors: list[str] = []

    def update(self, text: str) -> Session | None:
        """Replace the document text; remounts on any change."""
        if text == self.text:
            return self.session

        self.text = text
        self.reports.clear()

        match self.loader.load(text):
            case Success(document):
                self.errors = []
                self.session = Session(document, self.dispatcher, self.reports)
            case Failure(errors):
                logger.info("playground_invalid", errors=len(errors))
                self.errors = list(errors)
                self.session = None

        return self.session

    def load_template(self, key: str) -> Session | None:
        """Load a bundled document by key (chat, contact, dashboard)."""
        if key not in TEMPLATES:
            raise KeyError(f"Unknown template: {key}")
        return self.update(template_text(key))

    def preview(self) -> str:
        """Error list (one per line) or the rendered HTML."""
        if self.errors:
            return "\n".join(self.errors)
        if self.session is not None:
            return self.session.html()
        return ""
