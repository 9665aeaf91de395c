"""
Tagging collaborators: sentence segmentation + coarse POS tagging

The parsers never tag text themselves. A ``Tagger`` is handed to the
orchestrator, which makes it easy to swap in another pipeline or a test double.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

import spacy
from spacy.language import Language
from spacy.tokens import Doc

from depparse.data.structures import PosCategory, Token
from depparse.utils.constants import config

TaggedWord = Tuple[str, str]

DEFAULT_SPACY_MODEL = "en_core_web_sm"


class Tagger(ABC):
    """Segments raw text into sentences and tags each word with a category."""

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def tag(self, sentence: str) -> List[Any]:
        """Return ``(text, pos)`` pairs or ``{'text', 'pos'}`` mappings, in order."""
        raise NotImplementedError


@lru_cache(maxsize=None)
def load_spacy_model(name: str) -> Language:
    """Load (once per process) an installed spaCy pipeline."""
    try:
        return spacy.load(name)
    except OSError as e:
        raise RuntimeError(
            f"spaCy pipeline '{name}' is not installed. "
            f"Install it with `python -m spacy download {name}`."
        ) from e


class SpacyTagger(Tagger):
    """
    Tags with a spaCy pipeline.

    Sentences come from ``doc.sents``; each token's universal POS tag
    (``token.pos_``) is mapped onto the closed category set. Punctuation and
    whitespace tokens are dropped.

    Args:
        model: name of an installed spaCy pipeline, loaded on first use
        nlp: an already loaded pipeline (or any callable returning a ``Doc``)
    """

    def __init__(self, model: str = DEFAULT_SPACY_MODEL, nlp: Optional[Callable[[str], Doc]] = None):
        self.model = model
        self._nlp = nlp

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]] = None) -> 'SpacyTagger':
        tagging = (cfg if cfg is not None else config).get('tagging', {})
        return cls(model=tagging.get('spacy_model') or DEFAULT_SPACY_MODEL)

    def load(self) -> 'SpacyTagger':
        """Load the pipeline now instead of on first use."""
        if self._nlp is None:
            self._nlp = load_spacy_model(self.model)
        return self

    @property
    def nlp(self) -> Callable[[str], Doc]:
        return self.load()._nlp

    def segment(self, text: str) -> List[str]:
        if not text.strip():
            return []
        doc = self.nlp(text.strip())
        if not doc.has_annotation("SENT_START"):
            return [doc.text]
        return [sent.text.strip() for sent in doc.sents if sent.text.strip()]

    def tag(self, sentence: str) -> List[TaggedWord]:
        return [
            (token.text, PosCategory.from_upos(token.pos_).value)
            for token in self.nlp(sentence)
            if not (token.is_punct or token.is_space)
        ]


class CallableTagger(Tagger):
    """Adapt plain functions to the ``Tagger`` interface."""

    def __init__(self, tag_fn: Callable[[str], Iterable[Any]],
                 segment_fn: Optional[Callable[[str], Iterable[str]]] = None):
        self.tag_fn = tag_fn
        self.segment_fn = segment_fn

    def segment(self, text: str) -> List[str]:
        if self.segment_fn is None:
            return [text] if text.strip() else []
        return list(self.segment_fn(text))

    def tag(self, sentence: str) -> List[Any]:
        return list(self.tag_fn(sentence))


def build_tokens(tagged: Iterable[Any]) -> List[Token]:
    """
    Turn tagger output into 1-indexed tokens.

    Unknown categories are kept as-is (the scorer gives them the default
    affinity); a missing tag becomes ``Other``. Items without text are dropped.
    """
    tokens = []
    for item in tagged:
        if isinstance(item, Mapping):
            text, pos = item.get('text'), item.get('pos')
        else:
            text, pos = item
        if text is None or not str(text).strip():
            continue
        pos = str(pos) if pos else PosCategory.OTHER.value
        tokens.append(Token(text=str(text), pos=pos, index=len(tokens) + 1))
    return tokens
