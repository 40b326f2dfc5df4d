"""Configuration classes for depgraph analyses."""

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Parameters for the end-to-end analysis pipeline."""

    # Weight used for edges loaded without an explicit weight
    default_weight: float = 1.0

    # Condensation vertex that path queries start from
    source: int = 0

    # Prefix of condensation vertex labels, e.g. "SCC0{A,B}"
    component_label_prefix: str = "SCC"

    # Also search every condensation vertex as a source for the critical path
    compute_all_sources_critical_path: bool = False

    def validate(self) -> None:
        """Raise ``ValueError`` if any field is out of range."""
        if self.source < 0:
            raise ValueError(f"source must be non-negative, got {self.source}")
        if not self.component_label_prefix:
            raise ValueError("component_label_prefix must not be empty")


# Global configuration instance
ANALYSIS_CONFIG = AnalysisConfig()
