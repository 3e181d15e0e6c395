from .export_json import ExportFormatError, read_export_json, read_export_json_file

__all__ = ["ExportFormatError", "read_export_json", "read_export_json_file"]
