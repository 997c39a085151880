import os
import json
import pandas as pd
from datetime import datetime


class OutputWriter:
    """Writes validation artefacts (CSV tables, PNG figures, JSON summaries)."""

    @staticmethod
    def ensure_directory(path):
        os.makedirs(path, exist_ok=True)

    @staticmethod
    def save_json(data: dict, filepath: str):
        # numpy scalars are not JSON serialisable
        with open(filepath, "w") as f:
            json.dump(data, f, indent=4, default=str)

    @staticmethod
    def save_dataframe(df: pd.DataFrame, filepath: str):
        df.to_csv(filepath, index=False)

    @staticmethod
    def save_figure(fig, filepath: str):
        fig.tight_layout()
        fig.savefig(filepath)

    @staticmethod
    def timestamp():
        return datetime.now().strftime("%Y%m%d_%H%M%S")

    @classmethod
    def write_report(cls, output_path, tables=None, figures=None, summary=None):
        """
        Save a set of named artefacts under output_path.

        Args:
            tables: dict name -> DataFrame, written as <name>.csv
            figures: dict name -> matplotlib Figure, written as <name>.png
            summary: dict written as summary.json with a run timestamp

        Returns:
            list of written file paths
        """
        cls.ensure_directory(output_path)
        written = []

        for name, df in (tables or {}).items():
            path = os.path.join(output_path, f"{name}.csv")
            cls.save_dataframe(df, path)
            written.append(path)

        for name, fig in (figures or {}).items():
            path = os.path.join(output_path, f"{name}.png")
            cls.save_figure(fig, path)
            written.append(path)

        if summary is not None:
            path = os.path.join(output_path, "summary.json")
            cls.save_json({"run_timestamp": cls.timestamp(), **summary}, path)
            written.append(path)

        return written
