"""Catalog ingestion helpers for the CrankSmith engine."""

from cranksmith.data_ingestion.csv_loader import load_component_table

__all__ = ["load_component_table"]
