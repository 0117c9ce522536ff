from .response import parse_response

__all__ = ["parse_response"]
