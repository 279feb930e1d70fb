#!/usr/bin/env python3
"""
insiderci

Runs an Insider SAST analysis on a directory from a CI pipeline and fails the
build when the security score exceeds the configured threshold.
"""

import sys
import argparse
import traceback
from insiderci.utils.auth import Credentials
from insiderci.utils.config import Config
from insiderci.utils.archiver import zip_directory
from insiderci.utils.debug_logger import DebugLogger
from insiderci.utils.errors import WorkflowError
from insiderci.utils.file_manager import FileManager
from insiderci.utils.report_writer import ReportWriter
from insiderci.utils.summary import print_summary
from insiderci.operations.score_gate import should_fail
from insiderci.operations.workflow import ScanWorkflow

VERSION = "1.0.0"

def build_parser():
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='insiderci',
        description='insiderci is a utility that can be used on CI mats to perform tests on the Insider platform.'
    )
    parser.add_argument('dir', nargs='?', help='Directory to analyze')
    parser.add_argument('--email', help='Insider email')
    parser.add_argument('--password', help='Insider password')
    parser.add_argument('--no-fail', action='store_true', help='Do not fail analysis, even if issues were found')
    parser.add_argument('--score', type=float, help='Score to fail pipeline')
    parser.add_argument('--component', type=int, help='Component ID')
    parser.add_argument('--save', action='store_true', help='Save results on file in json and html format')
    parser.add_argument('--version', action='store_true', help='Print version')
    parser.add_argument('--env-file', default='.env', help='Path to environment file (default: .env)')
    parser.add_argument('--base-url', help='Insider API base URL')
    parser.add_argument('--debug', action='store_true', help='Enable debug output and debug log file')
    parser.add_argument('--output-dir', help='Output directory for saved results')
    parser.add_argument('--poll-interval', type=float, help='Seconds between analysis status checks')
    parser.add_argument('--max-wait', type=float, help='Maximum seconds to wait for the analysis')
    return parser

def default_workflow(config, debug_logger):
    """Build the workflow used by the CLI, with stage banners and poll progress."""
    return ScanWorkflow(config, debug_logger, show_progress=True)

def run(argv=None, workflow_factory=default_workflow):
    """Run the CLI and return the process exit code.

    Args:
        argv (list, optional): Command line arguments (default: sys.argv[1:])
        workflow_factory (callable): Builds the workflow from (config, debug_logger)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"insiderci version {VERSION}")
        return 0

    if not args.dir:
        parser.print_usage(sys.stderr)
        return 1

    try:
        config = Config.from_args(args, Config.from_env(args.env_file))
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    is_valid, error = config.validate()
    if not is_valid:
        print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    file_manager = FileManager(config, config.debug)
    log_path = None
    if config.debug:
        file_manager.setup_directories()
        log_path = file_manager.get_debug_log_path(config.component_id)
    debug_logger = DebugLogger(log_path, console_debug=config.debug)
    debug_logger.log(f"insiderci {VERSION}")
    debug_logger.log(f"Base URL: {config.base_url}")
    debug_logger.log(f"Component: {config.component_id}")
    debug_logger.log(f"Score threshold: {config.score_threshold} (fail on score: {config.fail_on_score})")

    try:
        try:
            archive_path = zip_directory(args.dir)
        except OSError as e:
            print(f"Error to zip directory {args.dir}: {e}", file=sys.stderr)
            return 1
        debug_logger.log(f"Archive: {archive_path}")

        credentials = Credentials(email=config.email, password=config.password)
        workflow = workflow_factory(config, debug_logger)
        try:
            sast = workflow.run(credentials, archive_path, config.component_id)
        except WorkflowError as e:
            print(f"Error [{e.stage or 'workflow'}]: {e}", file=sys.stderr)
            if config.debug:
                debug_logger.log(f"Traceback: {traceback.format_exc()}")
            return 1

        print_summary(sast)

        if config.save_results:
            writer = ReportWriter(config, file_manager, debug_logger)
            try:
                for path in writer.save(config.component_id, sast):
                    debug_logger.log(f"Saved {path}")
            except OSError as e:
                print(f"Error to save results: {e}", file=sys.stderr)
                return 1

        if should_fail(sast, config.score_threshold, config.fail_on_score):
            print(f"Security score {sast.score_text} is above the threshold {config.score_threshold:g}",
                  file=sys.stderr)
            return 1
        return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.", file=sys.stderr)
        debug_logger.log("INTERRUPTED: Operation cancelled by user")
        return 1
    finally:
        debug_logger.close()

def main():
    """Main entry point."""
    sys.exit(run())

if __name__ == "__main__":
    main()
