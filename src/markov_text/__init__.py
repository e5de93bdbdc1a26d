"""First-order Markov chain text generator.

Build a ChainModel from a corpus buffer, then call ``step`` for one token at a
time. See ``markov_text.cli`` for the command-line driver.
"""

__version__ = "0.1.0"

from .config import ChainConfig
from .errors import EmptyModelError, MarkovError, UsageError
from .model import ChainModel
from .text_cleaning import CorpusCleanConfig, clean_corpus
from .tokenization import BOUNDARY, Tokenizer, tokenize
from .transitions import TransitionTable

__all__ = [
    "BOUNDARY",
    "ChainConfig",
    "ChainModel",
    "CorpusCleanConfig",
    "EmptyModelError",
    "MarkovError",
    "Tokenizer",
    "TransitionTable",
    "UsageError",
    "clean_corpus",
    "tokenize",
]
