"""
Parser Factory - Create dependency parsers by type
"""

from enum import Enum
from typing import Dict, Type, Any, List

from depparse.models.base_parser import BaseParser
from depparse.models.projective_parser import GreedyProjectiveParser, EisnerParser
from depparse.models.mst_parser import ArborescenceParser, GreedyHeadParser
from depparse.models.arc_standard_parser import ArcStandardParser


class ParserType(Enum):
    # Projective
    EISNER = "eisner"
    EISNER_DP = "eisner-dp"

    # Non-projective
    ARBORESCENCE = "arborescence"
    GREEDY_HEADS = "greedy-heads"

    # Transition-based
    ARC_STANDARD = "arc-standard"


class ParserFactory:
    """Factory for creating dependency parsers"""

    _parsers: Dict[ParserType, Type[BaseParser]] = {
        ParserType.EISNER: GreedyProjectiveParser,
        ParserType.EISNER_DP: EisnerParser,
        ParserType.ARBORESCENCE: ArborescenceParser,
        ParserType.GREEDY_HEADS: GreedyHeadParser,
        ParserType.ARC_STANDARD: ArcStandardParser,
    }

    _aliases: Dict[str, ParserType] = {
        "chu-liu": ParserType.ARBORESCENCE,
        "chu-liu-edmonds": ParserType.ARBORESCENCE,
        "mst": ParserType.ARBORESCENCE,
        "malt": ParserType.ARC_STANDARD,
    }

    @classmethod
    def get_parser_class(cls, parser_type: ParserType) -> Type[BaseParser]:
        if parser_type in cls._parsers:
            return cls._parsers[parser_type]
        raise ValueError(f"Unknown parser type: {parser_type}")

    @classmethod
    def create_parser(cls, parser_type: ParserType, **kwargs: Any) -> BaseParser:
        parser_class = cls.get_parser_class(parser_type)
        return parser_class(**kwargs)

    @classmethod
    def from_string(cls, parser_type_str: str) -> ParserType:
        key = parser_type_str.strip().lower().replace('_', '-')
        if key in cls._aliases:
            return cls._aliases[key]
        try:
            return ParserType(key)
        except ValueError:
            raise ValueError(
                f"Unknown parser type: {parser_type_str}. Choose from: {cls.available()}"
            ) from None

    @classmethod
    def create(cls, parser_type_str: str, **kwargs: Any) -> BaseParser:
        return cls.create_parser(cls.from_string(parser_type_str), **kwargs)

    @classmethod
    def available(cls) -> List[str]:
        return [t.value for t in ParserType]
