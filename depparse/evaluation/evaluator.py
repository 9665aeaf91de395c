"""
Evaluator for comparing parsing algorithms on gold sentences
"""
from typing import List, Dict, Any, Iterable, Optional

from tqdm import tqdm

from depparse.models.parser_factory import ParserFactory
from depparse.models.scorer import ArcScorer
from depparse.utils.logs import logger


class Evaluator:
    """
    Runs several parsers over the same gold sentences.

    Reports per algorithm:
    - UAS, LAS and speed
    - share of outputs that are well-formed trees / projective
    """

    def __init__(self, algorithms: Optional[Iterable[str]] = None, scorer: Optional[ArcScorer] = None):
        self.algorithms = list(algorithms) if algorithms else ParserFactory.available()
        self.scorer = scorer if scorer is not None else ArcScorer.from_config()
        self.parsers = {
            name: ParserFactory.create(name, scorer=self.scorer) for name in self.algorithms
        }

    def evaluate(self, sentences: List[Dict[str, Any]], verbose: bool = False) -> Dict[str, Dict[str, float]]:
        results = {}
        items = self.parsers.items()
        if verbose:
            items = tqdm(items, desc='Evaluating', total=len(self.parsers))

        for name, parser in items:
            result = parser.evaluate(sentences)
            n = result['num_sentences']
            result['tree_rate'] = result['valid_trees'] / n * 100 if n > 0 else 0.0
            result['projective_rate'] = result['projective_trees'] / n * 100 if n > 0 else 0.0
            results[name] = result
            logger.info(f"{name}: UAS {result['uas']:.2f}% | LAS {result['las']:.2f}% | "
                        f"trees {result['tree_rate']:.1f}% | {result['speed']:.1f} sent/s")

        return results
