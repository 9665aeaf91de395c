from .parse_config import ParseConfig
from .orchestrator import (
    ParsingOrchestrator, OrchestrationResult, ParsingCancelled,
    perform_dependency_parsing, parse_samples,
)

__all__ = [
    'ParseConfig',
    'ParsingOrchestrator', 'OrchestrationResult', 'ParsingCancelled',
    'perform_dependency_parsing', 'parse_samples',
]
