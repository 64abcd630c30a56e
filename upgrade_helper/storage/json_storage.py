"""JSON storage for tool results."""

import json
import os
from typing import Dict


class JSONStorage:
    """Render and save result payloads as JSON."""

    @staticmethod
    def dumps(payload: Dict) -> str:
        """Pretty-printed JSON, the same layout the tools return."""
        return json.dumps(payload, indent=2, ensure_ascii=False)

    @staticmethod
    def save(payload: Dict, filepath: str):
        """
        Save a payload to a JSON file.

        Args:
            payload: The result data
            filepath: Path to save the file
        """
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(JSONStorage.dumps(payload))

    @staticmethod
    def load(filepath: str) -> Dict:
        """
        Load a payload from a JSON file.

        Args:
            filepath: Path to the JSON file

        Returns:
            The decoded payload
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
