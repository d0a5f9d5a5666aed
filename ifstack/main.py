import argparse
import os
import sys
import json
from colorama import init, Fore, Style

from .config import Config
from .preprocessor import Preprocessor, PreprocessError

init(autoreset=True)

COLUMN = 40


def print_header():
    print(f"line  {'source':<{COLUMN}}  {'output':<{COLUMN}}  stack")
    print(f"----  {'-' * COLUMN}  {'-' * COLUMN}  {'-' * 19}")


def print_row(row):
    line = f"{row.line:4d}  {row.source:<{COLUMN}}  {row.output or '':<{COLUMN}}  {row.render_levels()}"
    if row.error is not None:
        print(Fore.RED + line)
    elif row.emitted:
        print(line)
    else:
        print(Style.DIM + line)


def print_rows(rows, quiet):
    for row in rows:
        if quiet:
            if row.emitted:
                print(row.output)
        else:
            print_row(row)


def print_diagnostic(filename, d):
    print(f"{Fore.MAGENTA}{filename}:{d.line}: {Fore.RED}{d.message}", file=sys.stderr)


def build_config(args):
    config = Config()
    if args.config:
        config.load_file(args.config)
    if args.define:
        config.parse_defines(args.define)
    if args.strict:
        config.strict = True
    if args.unknown_false:
        config.unknown_is_true = False
    return config


def main(argv=None):
    parser = argparse.ArgumentParser(prog="ifstack", description="ifstack - nested IF/ELSE/ENDIF evaluator")
    parser.add_argument("filename", help="Path to the input text file")
    parser.add_argument("--define", help="Named conditions usable as IF arguments (e.g. 'DEBUG=1,RELEASE=false')")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--strict", action="store_true", help="Stop at the first error")
    parser.add_argument("--unknown-false", action="store_true", help="Treat unrecognised IF arguments as false")
    parser.add_argument("--quiet", action="store_true", help="Only print emitted lines")
    parser.add_argument("--output", help="Path to save a JSON report")

    args = parser.parse_args(argv)

    # 1. Configuration
    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(Fore.RED + f"Error loading config {args.config}: {e}")
        return 1

    # 2. Input
    if not os.path.isfile(args.filename):
        print(Fore.RED + f"Error: failed to open \"{args.filename}\"")
        return 1

    if not args.quiet:
        print(Fore.CYAN + f"Parsing \"{args.filename}\"")
        print_header()

    # 3. Processing
    pp = Preprocessor(config)
    try:
        result = pp.process_file(args.filename)
    except PreprocessError as e:
        if e.result is not None:
            print_rows(e.result.rows, args.quiet)
        print_diagnostic(args.filename, e.diagnostic)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(Fore.RED + f"Error reading {args.filename}: {e}")
        return 1

    print_rows(result.rows, args.quiet)

    # 4. Reporting
    for d in result.diagnostics:
        print_diagnostic(args.filename, d)

    if not args.quiet:
        color = Fore.GREEN if result.ok else Fore.RED
        print(color + f"Processed {len(result.rows)} lines, emitted {len(result.output)}, "
                      f"found {len(result.diagnostics)} error(s).")

    if args.output:
        report_data = {
            "summary": {
                "file": args.filename,
                "lines": len(result.rows),
                "emitted": len(result.output),
                "errors": len(result.diagnostics)
            },
            "output": result.output,
            "diagnostics": [d.to_dict() for d in result.diagnostics]
        }
        with open(args.output, 'w') as f:
            json.dump(report_data, f, indent=2)
        if not args.quiet:
            print(Fore.CYAN + f"Report saved to {args.output}")

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
