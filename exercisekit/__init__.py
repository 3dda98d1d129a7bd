"""Terminal messages, a language-server project file and worked solutions for an exercise course."""

__version__ = "5.3.0"