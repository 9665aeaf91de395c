"""
Batch orchestration: tag raw samples, parse them, aggregate the results

Samples are processed in fixed-size chunks. Between chunks control is handed
back to the event loop so a shared scheduler (e.g. a UI loop) is never
monopolized; this is also where progress is reported and cancellation is
checked. Only the first sentence of every sample is parsed.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from depparse.data.structures import ParseResult
from depparse.data.tagger import Tagger, SpacyTagger, build_tokens
from depparse.models.base_parser import BaseParser
from depparse.models.parser_factory import ParserFactory
from depparse.models.scorer import ArcScorer
from depparse.parsing.parse_config import ParseConfig
from depparse.utils.logs import logger

ProgressCallback = Callable[[int], Any]


class ParsingCancelled(Exception):
    """Raised when a batch is cancelled at a chunk boundary."""

    def __init__(self, processed: int):
        super().__init__(f"Dependency parsing cancelled after {processed} sentences")
        self.processed = processed


@dataclass
class OrchestrationResult:
    representative_result: ParseResult
    sentences: List[str]
    algorithm: str
    total_processed: int
    total_skipped: int = 0
    results: List[ParseResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'representative_result': self.representative_result.to_dict(),
            'sentences': list(self.sentences),
            'algorithm': self.algorithm,
            'total_processed': self.total_processed,
            'total_skipped': self.total_skipped,
        }


class ParsingOrchestrator:
    """
    Parses a batch of raw text samples with one algorithm.

    Args:
        tagger: segmentation + tagging collaborator (default: SpacyTagger from config)
        config: run configuration (default: packaged config)
        scorer: arc scorer shared by the parser (default: packaged score table)
    """

    def __init__(self, tagger: Optional[Tagger] = None, config: Optional[ParseConfig] = None,
                 scorer: Optional[ArcScorer] = None):
        self.tagger = tagger if tagger is not None else SpacyTagger.from_config().load()
        self.config = config if config is not None else ParseConfig.from_config()
        self.parser: BaseParser = ParserFactory.create(self.config.algorithm, scorer=scorer)

    async def run(self, samples: Optional[Sequence[Any]],
                  on_progress: Optional[ProgressCallback] = None,
                  cancel_event: Optional[Any] = None) -> OrchestrationResult:
        samples = list(samples or [])
        to_process = samples[:self.config.sample_limit(len(samples))]
        total = len(to_process)
        chunk_size = self.config.chunk_size

        logger.info(f"Parsing {total} of {len(samples)} samples with {self.config.algorithm}")

        committed: List[Tuple[str, ParseResult]] = []
        skipped = 0

        self._check_cancelled(cancel_event, len(committed))

        for start in range(0, total, chunk_size):
            chunk = to_process[start:start + chunk_size]
            chunk_results = []

            for offset, sample in enumerate(chunk):
                parsed = self._parse_sample(sample, start + offset)
                if parsed is None:
                    skipped += 1
                    continue
                chunk_results.append(parsed)

            end = start + len(chunk)
            if end < total:
                # Yield to the event loop between chunks
                await asyncio.sleep(0)
                self._check_cancelled(cancel_event, len(committed))
                committed.extend(chunk_results)
                self._report(on_progress, min(100, round(end / total * 100)))
            else:
                committed.extend(chunk_results)

        self._report(on_progress, 100)

        logger.info(f"Parsed {len(committed)} sentences, skipped {skipped}")

        if not committed:
            return OrchestrationResult(
                representative_result=ParseResult.empty(),
                sentences=[],
                algorithm=self.config.algorithm,
                total_processed=0,
                total_skipped=skipped,
            )

        return OrchestrationResult(
            representative_result=committed[0][1],
            sentences=[sentence for sentence, _ in committed],
            algorithm=self.config.algorithm,
            total_processed=len(committed),
            total_skipped=skipped,
            results=[result for _, result in committed],
        )

    def _parse_sample(self, sample: Any, index: int) -> Optional[Tuple[str, ParseResult]]:
        if not isinstance(sample, str) or not sample.strip():
            logger.debug(f"Sample {index} is empty or not text, skipping")
            return None

        try:
            sentences = self.tagger.segment(sample)
            if not sentences:
                return None
            sentence = sentences[0]
            tokens = build_tokens(self.tagger.tag(sentence))
        except Exception as e:
            logger.warning(f"Tagging failed for sample {index}: {e}")
            return None

        if not tokens:
            logger.debug(f"Sample {index} produced no tokens, skipping")
            return None

        return sentence, self.parser.parse_result(tokens)

    @staticmethod
    def _check_cancelled(cancel_event: Optional[Any], processed: int):
        if cancel_event is not None and cancel_event.is_set():
            logger.warning(f"Cancellation requested, discarding in-flight chunk ({processed} sentences kept)")
            raise ParsingCancelled(processed)

    @staticmethod
    def _report(on_progress: Optional[ProgressCallback], percent: int):
        if on_progress is not None:
            on_progress(percent)


async def perform_dependency_parsing(samples: Optional[Sequence[Any]],
                                     config: Optional[ParseConfig] = None,
                                     tagger: Optional[Tagger] = None,
                                     on_progress: Optional[ProgressCallback] = None,
                                     cancel_event: Optional[Any] = None,
                                     scorer: Optional[ArcScorer] = None) -> OrchestrationResult:
    """Parse a batch of samples; see ``ParsingOrchestrator``."""
    orchestrator = ParsingOrchestrator(tagger=tagger, config=config, scorer=scorer)
    return await orchestrator.run(samples, on_progress=on_progress, cancel_event=cancel_event)


def parse_samples(samples: Optional[Sequence[Any]], **kwargs: Any) -> OrchestrationResult:
    """Synchronous wrapper around ``perform_dependency_parsing``."""
    return asyncio.run(perform_dependency_parsing(samples, **kwargs))
