"""web_archiver.report: Запись JSON-корпуса на диск."""

from web_archiver.report.json_report import ensure_output_dir, render_corpus

__all__ = ["ensure_output_dir", "render_corpus"]
