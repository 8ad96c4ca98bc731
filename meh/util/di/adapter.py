"""Adapter DI providers."""

from dishka import Scope, provide

from meh.adapter.markdown import MarkdownRenderer
from meh.domain.service import Renderer
from meh.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Stateless adapters shared by all requests."""

    scope = Scope.APP

    @provide
    def get_renderer(self) -> Renderer:
        """Provide the Markdown renderer."""
        return MarkdownRenderer()
