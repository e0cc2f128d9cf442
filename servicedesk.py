"""
servicedesk.py


Discrete-event simulation of one IT service-desk workday.


Ride (on-site repair), diagnostics and software-install requests arrive
over the shift, go through intake at the office, and queue for office,
ride or universal workers. Whatever is still waiting when the shift closes
is reported as left in the queue.


Usage:
python servicedesk.py RIDE DIAG SWI OFFICE_WORKERS RIDE_WORKERS UNIVERSAL


UNIVERSAL is 0 or 1; with 1 every job is served from one pool of universal
workers instead of separate office and ride staff.
"""


import argparse
import logging
import sys

from deskio.parser import PARAMETER_NAMES, parse_parameters
from deskio.report import format_report
from desk.workday import DeskSimulation
from simcore.errors import ConfigurationError, SimulationError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='servicedesk (DES-based IT service desk simulator)')
    parser.add_argument('ride', help='Approximate number of ride requests over the shift')
    parser.add_argument('diagnostics', help='Approximate number of diagnostics requests over the shift')
    parser.add_argument('install', help='Approximate number of software install requests over the shift')
    parser.add_argument('office_workers', help='Number of office workers')
    parser.add_argument('ride_workers', help='Number of ride workers')
    parser.add_argument('universal', help='1 to staff every job from the universal pool, 0 otherwise')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible run')
    parser.add_argument('--universal-capacity', type=int, default=None, help='Size of the universal pool')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging of DES events')
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        params = parse_parameters([getattr(args, name) for name in
                                   ('ride', 'diagnostics', 'install', 'office_workers', 'ride_workers', 'universal')])
        if args.universal_capacity is not None and args.universal_capacity < 0:
            raise ConfigurationError(f"universal capacity must be non-negative, got {args.universal_capacity}")
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        print(f"usage: {' '.join(PARAMETER_NAMES)}", file=sys.stderr)
        return 1

    if params.universal_mode:
        print("Universal staffing mode enabled.")
    print("Simulation started: ")
    sim = DeskSimulation(params, seed=args.seed, universal_capacity=args.universal_capacity)
    try:
        stats = sim.run()
    except SimulationError as e:
        print(f"simulation aborted at t={sim.queue.now}: {e}", file=sys.stderr)
        return 2

    for line in format_report(sim.pools(), stats):
        print(line)
    print("Simulation ended.")
    return 0


# ------------------------------- CLI ---------------------------------
if __name__ == '__main__':
    sys.exit(main())
