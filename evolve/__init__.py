"""An artificial-life simulation of bugs evolving their movement genes."""

__version__ = "0.11.2.dev0"