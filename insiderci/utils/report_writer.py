"""JSON and HTML result reports."""

import json
from html import escape
import requests

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Insider SAST report - component {component}</title>
<link rel="stylesheet" href="style.css">
</head>
<body>
<div class="container">
<h1>Insider SAST report</h1>
<h2>Score Security {score}/100</h2>
{sections}
</div>
</body>
</html>
"""


class ReportWriter:
    """Write result-<component>.json and result-<component>.html."""

    def __init__(self, config, file_manager, debug_logger=None):
        """Initialize the report writer.

        Args:
            config (Config): Configuration instance
            file_manager (FileManager): Resolves output paths
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.config = config
        self.file_manager = file_manager
        self.logger = debug_logger

    def save(self, component_id, sast):
        """Write both reports and fetch the stylesheet.

        Returns:
            list: Paths written
        """
        self.file_manager.setup_directories()

        json_path = self.file_manager.get_result_path(component_id, 'json')
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(sast.to_dict(), f, indent='\t')

        html_path = self.file_manager.get_result_path(component_id, 'html')
        with open(html_path, 'w', encoding='utf-8') as f:
            f.write(self.render_html(component_id, sast))

        written = [json_path, html_path]
        style_path = self.fetch_style()
        if style_path:
            written.append(style_path)
        return written

    def fetch_style(self):
        """Download the report stylesheet. Failures are logged, never raised.

        Returns:
            str: Path to style.css, or None if it could not be fetched
        """
        style_path = self.file_manager.get_style_path()
        try:
            response = requests.get(self.config.style_url, timeout=self.config.request_timeout)
            response.raise_for_status()
            with open(style_path, 'wb') as f:
                f.write(response.content)
        except (requests.exceptions.RequestException, OSError) as e:
            self._log(f"Warning: could not fetch report stylesheet: {e}")
            return None
        return style_path

    def render_html(self, component_id, sast):
        sections = []

        if sast.dras:
            rows = ''.join(
                f"<tr><td>{escape(d.file)}</td><td>{escape(d.dra)}</td><td>{escape(d.type)}</td></tr>"
                for d in sast.dras
            )
            sections.append(self._table("DRA - Data Risk Analytics", ["File", "Dra", "Type"], rows))

        if sast.libraries:
            rows = ''.join(
                f"<tr><td>{escape(lib.name)}</td><td>{escape(lib.version)}</td></tr>"
                for lib in sast.libraries
            )
            sections.append(self._table("Libraries", ["Library", "Version"], rows))

        if sast.vulnerabilities:
            rows = ''.join(
                "<tr>" + ''.join(f"<td>{escape(value)}</td>" for value in (
                    v.cvss, v.rank, v.class_name, v.method, v.vul_id,
                    v.long_message, v.class_message, v.short_message
                )) + "</tr>"
                for v in sast.vulnerabilities
            )
            sections.append(self._table(
                "Vulnerabilities",
                ["CVSS", "Rank", "Class", "Method", "VulnerabilityID",
                 "LongMessage", "ClassMessage", "ShortMessage"],
                rows
            ))

        return HTML_TEMPLATE.format(
            component=escape(str(component_id)),
            score=escape(sast.score_text),
            sections='\n'.join(sections)
        )

    @staticmethod
    def _table(title, headers, rows):
        head = ''.join(f"<th>{escape(h)}</th>" for h in headers)
        return (f"<h3>{escape(title)}</h3>\n"
                f"<table class=\"table table-striped\"><thead><tr>{head}</tr></thead>"
                f"<tbody>{rows}</tbody></table>")

    def _log(self, message):
        if self.logger:
            self.logger.log(message)
        else:
            print(message)
