from .structures import PosCategory, Token, Arc, Node, Edge, ParseResult, DependencyTree, ROOT
from .tagger import Tagger, SpacyTagger, CallableTagger, build_tokens, load_spacy_model
from .loader import CoNLLUDataset, load_sentences

__all__ = [
    'PosCategory', 'Token', 'Arc', 'Node', 'Edge', 'ParseResult', 'DependencyTree', 'ROOT',
    'Tagger', 'SpacyTagger', 'CallableTagger', 'build_tokens', 'load_spacy_model',
    'CoNLLUDataset', 'load_sentences',
]
