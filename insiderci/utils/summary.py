"""Console summary of a scan result."""

import sys

RULE = "-" * 119

def print_summary(sast, out=None):
    """Print score, DRA, libraries and vulnerabilities."""
    out = out or sys.stdout

    print(RULE, file=out)
    print(f"Score Security {sast.score_text}/100", file=out)
    print(RULE, file=out)

    if sast.dras:
        print("DRA - Data Risk Analytics", file=out)
        for dra in sast.dras:
            print(f"File: {dra.file}", file=out)
            print(f"Dra: {dra.dra}", file=out)
            print(f"Type: {dra.type}", file=out)

    if sast.libraries:
        print(RULE, file=out)
        print(f"{'Library':<20} {'Version':<10} ", file=out)
        for lib in sast.libraries:
            print(f"{lib.name:<20} {lib.version:<10} ", file=out)

    if sast.vulnerabilities:
        print(RULE, file=out)
        print("Vulnerabilities", file=out)
        for v in sast.vulnerabilities:
            print(f"CVSS: {v.cvss}", file=out)
            print(f"Rank: {v.rank}", file=out)
            print(f"Class: {v.class_name}", file=out)
            print(f"Method: {v.method}", file=out)
            print(f"VulnerabilityID: {v.vul_id}", file=out)
            print(f"LongMessage: {v.long_message}", file=out)
            print(f"ClassMessage: {v.class_message}", file=out)
            print(f"ShortMessage: {v.short_message}\n", file=out)

    print(RULE, file=out)
