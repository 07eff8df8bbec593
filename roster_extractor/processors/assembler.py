"""
Document assembler.

Single-pass fold over the document lines. The assembler owns the current
open committee and the list of finished ones:

- noise line: skipped
- header line: flush the open committee if it has voters, then open a new
  one from the header lookahead
- voter row: voters are appended to the open committee, or the line is
  ignored when no committee is open yet
- end of input: final flush

A committee that never accumulated a voter is discarded, not flushed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models import Committee, OpenCommittee
from .base import BaseProcessor, ProcessingContext
from .header_resolver import HeaderResolver
from .line_classifier import LineClassifier, LineKind, build_classifier
from .noise_filter import NoiseFilter
from .voter_extractor import VoterExtractor


@dataclass(frozen=True)
class AssemblyResult:
    """Output of the fold, before validation."""
    committees: Tuple[Committee, ...]
    detected_committee_names: Tuple[str, ...]  # every header seen, kept or discarded
    lines: Tuple[str, ...]

    @property
    def line_count(self) -> int:
        return len(self.lines)


class DocumentAssembler(BaseProcessor):
    """Fold classified lines into committees."""

    name = "DocumentAssembler"

    def __init__(
        self,
        context: ProcessingContext,
        lines: Sequence[str],
        classifier: Optional[LineClassifier] = None,
    ):
        super().__init__(context)
        extraction = self.config.extraction
        self.lines = tuple(lines)
        self.noise_filter = NoiseFilter(extraction)
        self.classifier = classifier or build_classifier(config=extraction)
        self.resolver = HeaderResolver(extraction)
        self.extractor = VoterExtractor(extraction, self.noise_filter, stats=context.stats)

        self._open: Optional[OpenCommittee] = None
        self._committees: List[Committee] = []
        self._detected: List[str] = []

    def process(self) -> AssemblyResult:
        stats = self.context.stats
        stats.total_lines = len(self.lines)

        for index, line in enumerate(self.lines):
            if self.noise_filter.is_noise(line):
                stats.noise_lines += 1
                continue

            kind = self.classifier.classify(line)

            if kind is LineKind.HEADER:
                stats.header_lines += 1
                self._flush()
                self._open = self.resolver.resolve(self.lines, index)
                self._detected.append(self._open.name)
                self.log_debug("Opened committee", name=self._open.name, sub=self._open.sub_number)
            elif kind is LineKind.VOTER_ROW:
                stats.voter_lines += 1
                if self._open is None:
                    stats.unattached_voter_lines += 1
                    continue
                self._open.add_voters(self.extractor.extract(line))
            else:
                stats.unclassified_lines += 1

        self._flush()

        self.log_info(
            f"Assembled {len(self._committees)} committee(s)",
            classifier=self.classifier.name,
            detected=len(self._detected),
        )
        return AssemblyResult(
            committees=tuple(self._committees),
            detected_committee_names=tuple(self._detected),
            lines=self.lines,
        )

    def _flush(self) -> None:
        """Close the open committee, keeping it only if it has voters."""
        committee, self._open = self._open, None
        if committee is None:
            return
        if committee.has_voters:
            self._committees.append(committee.freeze())
            self.context.stats.committees_flushed += 1
            self.log_debug("Flushed committee", name=committee.name, voters=len(committee.voters))
        else:
            self.context.stats.committees_discarded += 1
            self.log_debug("Discarded empty committee", name=committee.name)
