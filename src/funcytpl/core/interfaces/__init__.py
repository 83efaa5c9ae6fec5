from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .placeholders import PlaceholderFunctionProtocol
from .render import TemplateRendererProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PlaceholderFunctionProtocol',
    'TemplateRendererProtocol',
]
