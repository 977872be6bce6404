"""Core modules for the Earnings Analyser application."""

from . import aggregate, config, errors, parser, session, summarize, synth, utils, view, viz

__all__ = [
	"aggregate",
	"config",
	"errors",
	"parser",
	"session",
	"summarize",
	"synth",
	"utils",
	"view",
	"viz",
]
