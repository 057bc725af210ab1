from cssvg.stylesheet.parser import parse_stylesheet
from cssvg.stylesheet.model import Declaration, Stylesheet

__all__ = ["parse_stylesheet", "Declaration", "Stylesheet"]
