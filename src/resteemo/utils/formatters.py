"""Formatting utilities for displaying captainteemo API responses."""

import json
from typing import Any, Dict, List, Tuple


class OutputFormatter:
    """Handles formatting of API responses for console output."""

    @staticmethod
    def format_response(title: str, response: Dict[str, Any]) -> str:
        """
        Format an API response for display.

        Args:
            title: Heading printed above the payload
            response: Validated API response

        Returns:
            Formatted response string
        """
        payload = response.get('data', response)
        lines = [
            "=" * 50,
            title.upper(),
            "=" * 50,
            json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
        ]

        return "\n".join(lines)

    @staticmethod
    def format_platforms(platforms: List[Tuple[str, str]]) -> str:
        """Format the platform table as 'short  full' rows."""
        lines = [
            "SUPPORTED PLATFORMS",
            "=" * 30
        ]
        lines.extend(f"{short:<5} {full}" for short, full in platforms)

        return "\n".join(lines)

    @staticmethod
    def format_error_message(error: str, suggestion: str = None) -> str:
        """
        Format error messages for display.

        Args:
            error: Error message
            suggestion: Optional suggestion for resolving the error

        Returns:
            Formatted error message
        """
        lines = [
            "❌ ERROR",
            "=" * 30,
            error
        ]

        if suggestion:
            lines.extend([
                "",
                "💡 Suggestion:",
                suggestion
            ])

        return "\n".join(lines)
