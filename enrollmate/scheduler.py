import json
import argparse
import logging
import sys
from typing import Dict, List, Tuple

from pydantic import ValidationError
from tabulate import tabulate

from .exceptions import EnrollmateError
from .models import Constraints, GeneratedSchedule, GenerationRequest
from .ranking import FILTERS, SORT_KEYS, filter_schedules, sort_schedules, summarize
from .search import generate
from .timeparse import DAY_NAMES, DAY_ORDER, format_clock, sort_days


SLOT_MINUTES = 30


def load_config(config_path: str = 'config.json') -> GenerationRequest:
    """Load courses and constraints from a JSON config file."""
    with open(config_path, 'r') as f:
        return GenerationRequest.model_validate(json.load(f))


def build_calendar(schedule: GeneratedSchedule) -> Tuple[List[str], List[List[str]]]:
    """
    Lay a schedule out on a weekly grid of 30-minute slots.

    Returns the header row and the table rows, one per slot between the
    earliest start and the latest end (rounded out to whole slots).
    """
    first_slot = schedule.meta.earliest_start // SLOT_MINUTES * SLOT_MINUTES
    last_slot = -(-schedule.meta.latest_end // SLOT_MINUTES) * SLOT_MINUTES
    days = sorted(DAY_ORDER, key=DAY_ORDER.__getitem__)

    rows = []
    for slot in range(first_slot, last_slot, SLOT_MINUTES):
        row = [format_clock(slot)]
        for day in days:
            cell = ''
            for section in schedule.sections:
                if day in section.days and section.start < slot + SLOT_MINUTES and slot < section.end:
                    cell = f"{section.course_code}\nG{section.group}"
                    break
            row.append(cell)
        rows.append(row)

    return ['Time'] + [DAY_NAMES[day] for day in days], rows


def print_schedule(schedule: GeneratedSchedule, schedule_num: int, show_calendar: bool = False):
    """Print a schedule as a section list, optionally followed by a weekly grid."""
    meta = schedule.meta
    print(f"\n{'='*80}")
    print(f"Schedule {schedule_num}")
    print(f"{'='*80}")
    ending = "Ends by preferred time" if meta.ends_by_preferred else "Late end"
    print(f"{ending} (last class ends {format_clock(meta.latest_end)}), "
          f"{meta.full_count} full section(s)\n")

    table = [
        [section.course_code, section.course_name, section.group,
         ''.join(sort_days(section.days)),
         f"{format_clock(section.start)} - {format_clock(section.end)}",
         section.enrolled, section.status]
        for section in schedule.sections
    ]
    print(tabulate(table, headers=['Course', 'Name', 'Group', 'Days', 'Time', 'Enrolled', 'Status']))

    if show_calendar:
        print("\n" + "="*80)
        print("Weekly Calendar")
        print("="*80)
        headers, rows = build_calendar(schedule)
        print(tabulate(rows, headers=headers, tablefmt="grid"))


def export_schedules_to_json(schedules: List[GeneratedSchedule], constraints: Constraints,
                             output_file: str = 'schedules.json'):
    """Write the constraints used and every schedule's selections to a JSON file."""
    export_data = {
        'constraints': constraints.model_dump(mode='json'),
        'schedules': [schedule.model_dump(mode='json') for schedule in schedules],
    }
    with open(output_file, 'w') as f:
        json.dump(export_data, f, indent=2)

    print(f"\nExported {len(schedules)} schedules to {output_file}")


def load_exported_schedules(input_file: str) -> Tuple[Constraints, List[GeneratedSchedule]]:
    """Reload a file written by ``export_schedules_to_json``."""
    with open(input_file, 'r') as f:
        data = json.load(f)
    constraints = Constraints.model_validate(data['constraints'])
    schedules = [GeneratedSchedule.model_validate(item) for item in data['schedules']]
    return constraints, schedules


def print_summary(counts: Dict[str, int]):
    print(f"Total: {counts['total']}  |  Ends by time: {counts['ends_by_time']}  |  "
          f"Late: {counts['has_late']}  |  With full sections: {counts['has_full']}")


def main(argv=None):
    """Generate schedules for the courses in a config file and print or export them."""
    parser = argparse.ArgumentParser(description='Generate conflict-free class schedules')
    parser.add_argument('--config', type=str, default='config.json',
                        help='JSON file with courses and constraints (default: config.json)')
    parser.add_argument('--calendar', action='store_true',
                        help='Show calendar view for schedules')
    parser.add_argument('--print', action='store_true',
                        help='Print schedules to console (default: export to file)')
    parser.add_argument('--max-display', type=int, default=None,
                        help='Maximum number of schedules to display when printing (default: all)')
    parser.add_argument('--output', type=str, default='schedules.json',
                        help='Output file for schedules (default: schedules.json)')
    parser.add_argument('--sort', choices=list(SORT_KEYS), default='best',
                        help='Result ordering (default: best)')
    parser.add_argument('--filter', choices=list(FILTERS), default='all',
                        help='Only keep matching schedules (default: all)')
    parser.add_argument('--logging', action='store_true',
                        help='Enable logging/debug output')
    args = parser.parse_args(argv)

    if args.logging:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        request = load_config(args.config)
    except FileNotFoundError:
        print(f"Config file not found: {args.config}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Config file {args.config} is not valid JSON: {e}")
        sys.exit(1)
    except (EnrollmateError, ValidationError) as e:
        print(f"Invalid config: {e}")
        sys.exit(1)

    constraints = request.constraints
    print(f"Courses: {', '.join(course.code for course in request.courses)}")
    print(f"Preferred window: {format_clock(constraints.earliest_start)} - "
          f"{format_clock(constraints.latest_end)}, "
          f"allow_full={constraints.allow_full}, allow_at_risk={constraints.allow_at_risk}, "
          f"max_full_per_schedule={constraints.max_full_per_schedule}\n")

    print("Generating schedules...")
    schedules = generate(request.courses, constraints)
    print_summary(summarize(schedules))

    schedules = sort_schedules(filter_schedules(schedules, args.filter), by=args.sort)

    if len(schedules) > 0:
        if args.print:
            num_to_display = len(schedules) if args.max_display is None else min(args.max_display, len(schedules))
            print(f"\nDisplaying {num_to_display} schedule(s):\n")
            for idx, schedule in enumerate(schedules[:num_to_display], 1):
                print_schedule(schedule, idx, show_calendar=args.calendar)
        else:
            export_schedules_to_json(schedules, constraints, args.output)
    else:
        print("\nNo valid schedules found. Try relaxing your constraints or adding more section options.")


if __name__ == '__main__':
    main()
