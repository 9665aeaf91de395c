"""
Performance profiling for the parsing algorithms

1. Builds a synthetic dataset from a fixed pool of sentences
2. Times every algorithm on the full dataset (several runs each)
3. Times random samples of the dataset at several fractions
4. Checks that sampled parses are identical to the full-run parses
"""

import random
import time
from typing import Dict, List, Sequence, Any, Optional

import numpy as np
from tqdm import tqdm

from depparse.data.structures import ParseResult, Token
from depparse.data.tagger import Tagger, SpacyTagger, build_tokens
from depparse.models.parser_factory import ParserFactory
from depparse.models.scorer import ArcScorer

SAMPLE_SENTENCES = [
    "The quick brown fox jumps over the lazy dog",
    "A beautiful sunset painted the sky with vibrant colors",
    "Scientists discovered a new species in the rainforest",
    "The ancient castle stood majestically on the hilltop",
    "Children played happily in the sunny park",
    "Technology advances rapidly in modern society",
    "The orchestra performed brilliantly at the concert hall",
    "Mountains rise dramatically above the valley floor",
    "Researchers analyze data carefully before drawing conclusions",
    "The garden blooms beautifully in spring",
    "Students study diligently for their final examinations",
    "The river flows gently through the peaceful countryside",
    "Artists create masterpieces with passion and dedication",
    "The storm approached quickly from the distant horizon",
    "Customers appreciate excellent service at restaurants",
    "The museum displays fascinating artifacts from ancient civilizations",
    "Engineers design innovative solutions for complex problems",
    "Birds migrate annually to warmer climates",
    "The company announced exciting plans for expansion",
    "Volunteers help tirelessly in community projects",
]

DEFAULT_FRACTIONS = (0.2, 0.4, 0.6, 0.8)


def generate_dataset(n_samples: int, seed: int = 42) -> List[str]:
    rng = random.Random(seed)
    return [rng.choice(SAMPLE_SENTENCES) for _ in range(n_samples)]


def result_hash(result: ParseResult) -> str:
    """Order-independent fingerprint of the edge set."""
    return '|'.join(sorted(f"{e.source}->{e.target}" for e in result.edges))


def _time_run(parser, tagged: Sequence[List[Token]]):
    start = time.perf_counter()
    hashes = [result_hash(parser.parse_result(tokens)) for tokens in tagged]
    return (time.perf_counter() - start) * 1000, hashes


def _summary(durations: List[float]) -> Dict[str, float]:
    arr = np.asarray(durations)
    return {'mean_ms': float(arr.mean()), 'std_ms': float(arr.std()),
            'min_ms': float(arr.min()), 'max_ms': float(arr.max())}


def profile_algorithms(
    n_samples: int = 1000,
    runs: int = 10,
    fractions: Sequence[float] = DEFAULT_FRACTIONS,
    algorithms: Optional[Sequence[str]] = None,
    seed: int = 42,
    verbose: bool = True,
    tagger: Optional[Tagger] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Returns:
        {algorithm: {'full': timing summary, 'fractions': {fraction: timing summary + 'agreement'}}}
    """
    algorithms = list(algorithms) if algorithms else ParserFactory.available()
    dataset = generate_dataset(n_samples, seed)
    tagger = tagger if tagger is not None else SpacyTagger.from_config().load()
    tagged = [build_tokens(tagger.tag(sentence)) for sentence in dataset]
    scorer = ArcScorer.from_config()
    rng = random.Random(seed)

    report = {}
    for name in algorithms:
        parser = ParserFactory.create(name, scorer=scorer)

        durations = []
        full_hashes: List[str] = []
        for _ in tqdm(range(runs), desc=f"{name} (full)", disable=not verbose):
            elapsed, full_hashes = _time_run(parser, tagged)
            durations.append(elapsed)
        report[name] = {'full': _summary(durations), 'fractions': {}}

        for fraction in fractions:
            size = max(1, int(len(tagged) * fraction))
            durations = []
            agreement = []
            for _ in tqdm(range(runs), desc=f"{name} ({fraction:.0%})", disable=not verbose):
                indices = rng.sample(range(len(tagged)), size)
                elapsed, hashes = _time_run(parser, [tagged[i] for i in indices])
                durations.append(elapsed)
                agreement.append(np.mean([h == full_hashes[i] for h, i in zip(hashes, indices)]))
            summary = _summary(durations)
            summary['agreement'] = float(np.mean(agreement)) * 100
            report[name]['fractions'][fraction] = summary

    return report
