from .export_writer import ExportArtifact, csv_artifact, json_artifact, to_csv, to_json

__all__ = ["ExportArtifact", "csv_artifact", "json_artifact", "to_csv", "to_json"]
