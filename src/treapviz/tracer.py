"""
Debug tracing infrastructure for treapviz.

This module provides data structures for capturing detailed traces of the
rendering pipeline. When debug mode is enabled, the printer records every
pipeline stage and every layout decision made while composing blocks.

This is primarily useful for:
1. Debugging alignment issues (understanding why a label lands in a column)
2. Understanding the pipeline flow (seeing intermediate blocks)
3. Writing targeted tests (verifying specific offset decisions)

Usage:
    >>> printer = TreePrinter()
    >>> result = printer.render(root, debug=True)
    >>> trace = printer.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("debug_trace.txt")

The trace captures:
- Pipeline stages (project, layout)
- Block snapshots at each stage
- Every composed node with its case, shifts and branch geometry
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Layout cases, in the order the engine checks them
CASE_LEAF = "leaf"
CASE_ONLY_LEFT = "only_left"
CASE_ONLY_RIGHT = "only_right"
CASE_BOTH = "both"


@dataclass
class LayoutDecision:
    """
    Record of how one node's block was composed.

    Attributes:
        label: The node's label
        case: One of "leaf", "only_left", "only_right", "both"
        root_shift: Columns the root label was shifted right
        children_shift: Columns the child block(s) were shifted right
        branch_column: Column of the single branch glyph (single-child
                       cases only, otherwise None)
        branch_height: Rows of the wedge (0 unless both children exist)
        height: Number of lines in the composed block
        width: Length of the longest line in the composed block
    """

    label: str
    case: str
    root_shift: int = 0
    children_shift: int = 0
    branch_column: Optional[int] = None
    branch_height: int = 0
    height: int = 1
    width: int = 0

    def __str__(self) -> str:
        parts = [
            f"{self.label!r} [{self.case}]",
            f"root+{self.root_shift}",
            f"children+{self.children_shift}",
        ]
        if self.branch_column is not None:
            parts.append(f"branch@{self.branch_column}")
        if self.branch_height:
            parts.append(f"wedge={self.branch_height}")
        parts.append(f"block={self.width}x{self.height}")
        return " ".join(parts)


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    The rendering pipeline has two stages:
    1. project - Convert the source tree into the intermediate tree
    2. layout - Compose the text block

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
        block_snapshot: Optional list of rendered lines at this point
    """

    name: str
    data: Dict[str, Any]
    block_snapshot: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            # Truncate long values
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        if self.block_snapshot:
            lines.append("  Block preview (first 15 rows):")
            for row in self.block_snapshot[:15]:
                lines.append(f"    |{row}|")
        return "\n".join(lines)


@dataclass
class RenderTrace:
    """
    Complete trace of a render operation.

    This is the main container for all debug information collected during
    a render. It stores both high-level pipeline stages and the per-node
    layout decisions.

    Usage:
        >>> printer = TreePrinter()
        >>> result = printer.render(root, debug=True)
        >>> trace = printer.get_trace()
        >>>
        >>> # Get summary
        >>> print(trace.summary())
        >>>
        >>> # Find how a particular node was placed
        >>> for d in trace.get_decisions_for_label('5,1:"a"'):
        ...     print(d)
        >>>
        >>> # Get the final block
        >>> block = trace.get_block_at_stage("layout")

    Attributes:
        stages: List of pipeline stages with their data
        decisions: Layout decisions in composition (post-order) order
        label_format: Name of the label formatter used
    """

    stages: List[PipelineStage] = field(default_factory=list)
    decisions: List[LayoutDecision] = field(default_factory=list)
    label_format: str = ""

    def add_stage(
        self,
        name: str,
        data: Dict[str, Any],
        lines: Optional[List[str]] = None,
    ) -> None:
        """
        Add a pipeline stage snapshot.

        Args:
            name: Name of the stage (e.g., "layout")
            data: Dictionary of relevant data at this stage
            lines: Optional rendered lines to snapshot
        """
        snapshot = list(lines) if lines is not None else None
        self.stages.append(PipelineStage(name, data.copy(), snapshot))

    def add_decision(self, decision: LayoutDecision) -> None:
        """Record a layout decision."""
        self.decisions.append(decision)

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def get_block_at_stage(self, name: str) -> Optional[List[str]]:
        """Get the block snapshot at a specific stage."""
        stage = self.get_stage(name)
        if stage and stage.block_snapshot:
            return stage.block_snapshot
        return None

    def get_decisions_by_case(self, case: str) -> List[LayoutDecision]:
        """Get all decisions of a given layout case."""
        return [d for d in self.decisions if d.case == case]

    def get_decisions_for_label(self, label: str) -> List[LayoutDecision]:
        """Get all decisions for nodes with exactly this label."""
        return [d for d in self.decisions if d.label == label]

    def get_shifted_roots(self) -> List[LayoutDecision]:
        """
        Get all decisions where the root label had to move right.

        Useful when a parent is narrower than the span of its children.
        """
        return [d for d in self.decisions if d.root_shift > 0]

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with:
        - Label format
        - Pipeline stages overview
        - Layout decision statistics
        """
        lines = [
            "=" * 60,
            "RENDER TRACE SUMMARY",
            "=" * 60,
            "",
            f"Label format: {self.label_format or 'n/a'}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]

        for stage in self.stages:
            has_block = "+" if stage.block_snapshot else "-"
            lines.append(f"  [{has_block}] {stage.name}")

        lines.extend(
            [
                "",
                f"Total layout decisions: {len(self.decisions)}",
                f"Shifted roots: {len(self.get_shifted_roots())}",
                "",
            ]
        )

        # Count by case
        case_counts: Dict[str, int] = {}
        for d in self.decisions:
            case_counts[d.case] = case_counts.get(d.case, 0) + 1

        lines.append("Decisions by case:")
        for case, count in sorted(case_counts.items(), key=lambda x: -x[1]):
            lines.append(f"  {case}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """
        Generate a complete human-readable dump of the trace.

        This includes all stages with their full data and all layout
        decisions. Can be quite long for large trees.
        """
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PIPELINE STAGES:")
        lines.append("-" * 40)
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")

        lines.append("LAYOUT DECISIONS:")
        lines.append("-" * 40)
        for d in self.decisions:
            lines.append(str(d))

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())

    def dump_block_evolution(self) -> str:
        """
        Show the block snapshot recorded at each stage.

        Returns a string with every stage that has a snapshot, framed so
        trailing spaces stay visible.
        """
        lines = [
            "=" * 60,
            "BLOCK EVOLUTION",
            "=" * 60,
        ]

        for stage in self.stages:
            if stage.block_snapshot:
                lines.append("")
                lines.append(f"--- After: {stage.name} ---")
                for row in stage.block_snapshot:
                    lines.append(f"|{row}|")

        return "\n".join(lines)
