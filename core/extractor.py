from typing import Optional

from .config_loader import Settings
from core import log
from modules.static_analyzer.export_filter import extract
from modules.static_analyzer.manifest_parser import ManifestParser, serialize


class ManifestExtractor:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def _log_if_verbose(self, verbose: bool, message: str):
        if verbose:
            log.info(message)

    def extract(self, input_path: str, output_path: Optional[str] = None, verbose: Optional[bool] = None) -> int:
        """
        Reads input_path, keeps only the exported components and writes the
        result to output_path. Returns the number of exported components.
        The output file is written once, after the whole document is built.
        """
        output_path = output_path or self.settings.output.path
        if verbose is None:
            verbose = self.settings.logging.verbose

        self._log_if_verbose(verbose, f"📖 Reading AndroidManifest.xml from: {input_path}")
        parser = ManifestParser(input_path)
        log.debug(
            f"Parsed manifest for package '{parser.package_name}' "
            f"with {parser.manifest.application.component_count()} components"
        )

        extracted, total_found = extract(parser.manifest, verbose)
        output_xml = serialize(extracted, indent=self.settings.output.indent)

        self._write_output_file(output_path, output_xml)
        self._log_if_verbose(verbose, f"📝 Output written to: {output_path}")
        return total_found

    def _write_output_file(self, output_path: str, content: str):
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            log.error(f"Could not write output file {output_path}: {e}")
            raise
