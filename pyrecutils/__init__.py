"""Run the GNU recutils tools on rec files and in-memory record sets."""

__version__ = "0.1.0"