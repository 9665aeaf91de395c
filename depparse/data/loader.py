"""
CoNLL-U loading for evaluation against gold treebanks
"""
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from conllu import parse_incr
from conllu.exceptions import ParseException

from depparse.data.structures import PosCategory
from depparse.utils.logs import logger


class CoNLLUDataset:
    """Gold sentences as lists of ``{id, form, upos, head, deprel}`` rows."""

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)
        self.sentences: List[List[Dict[str, Any]]] = []
        self.load_data()

    def __len__(self):
        return len(self.sentences)

    def __iter__(self) -> Iterator[List[Dict[str, Any]]]:
        return iter(self.sentences)

    def load_data(self):
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                for tokenlist in parse_incr(f):
                    rows = [self._row(token) for token in tokenlist if isinstance(token['id'], int)]
                    if rows:
                        self.sentences.append(rows)
        except ParseException as e:
            logger.error(f"Malformed CoNLL-U in {self.file_path}: {e}")
            raise
        except OSError as e:
            logger.error(f"Cannot read {self.file_path}: {e}")
            raise
        logger.info(f"Loaded {len(self.sentences)} sentences from {self.file_path}")

    @staticmethod
    def _row(token) -> Dict[str, Any]:
        # multiword ranges and empty nodes carry tuple ids and are filtered out before this
        return {
            'id': token['id'],
            'form': token['form'],
            'upos': token.get('upos') or '_',
            'head': int(token['head']) if token.get('head') is not None else 0,
            'deprel': token.get('deprel') or '_',
        }

    def get_sentences(self):
        return self.sentences


def load_sentences(file_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load a CoNLL-U file as parser-ready dicts: words, coarse pos_tags, heads, base rels."""
    return [
        {
            'words': [row['form'] for row in sent],
            'pos_tags': [PosCategory.from_upos(row['upos']).value for row in sent],
            'heads': [row['head'] for row in sent],
            'rels': [row['deprel'].split(':')[0] for row in sent],
        }
        for sent in CoNLLUDataset(file_path)
    ]
