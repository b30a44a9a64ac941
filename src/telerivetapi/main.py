#!/usr/bin/env python3
import argparse
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

from telerivetapi.config import ApiConfig
from telerivetapi.errors import TelerivetApiError
from telerivetapi.projects import Project
from telerivetapi.telerivet_api import TelerivetAPI

logger = logging.getLogger(__name__)


def setup_logging(args: argparse.Namespace) -> None:
    handlers = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(RotatingFileHandler(args.log_file, maxBytes=1000000, backupCount=10))
    logging.basicConfig(
        handlers=handlers,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        level=logging.DEBUG if args.debug else logging.INFO,
    )


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, sort_keys=True))


def get_project(api: TelerivetAPI, config: ApiConfig, args: argparse.Namespace) -> Project:
    project_id = args.project or config.project_id
    if not project_id:
        raise ValueError('No project given, use --project or set TELERIVET_PROJECT_ID')
    return api.init_project_by_id(project_id)


def run_project(api: TelerivetAPI, project: Project, args: argparse.Namespace) -> None:
    print_json(project.load().to_dict())


def run_send(api: TelerivetAPI, project: Project, args: argparse.Namespace) -> None:
    options = {'to_number': args.to_number, 'content': args.content}
    if args.route:
        options['route_id'] = args.route
    print_json(project.send_message(options).to_dict())


def run_schedule(api: TelerivetAPI, project: Project, args: argparse.Namespace) -> None:
    message = project.schedule_message({
        'to_number': args.to_number,
        'content': args.content,
        'start_time_offset': args.offset,
    })
    print_json(message.to_dict())


def run_contacts(api: TelerivetAPI, project: Project, args: argparse.Namespace) -> None:
    options = {}
    if args.name_prefix:
        options['name'] = {'prefix': args.name_prefix}
    cursor = project.query_contacts(options).limit(args.limit)
    print_json([contact.to_dict() for contact in cursor])


def run_contact(api: TelerivetAPI, project: Project, args: argparse.Namespace) -> None:
    options = {'phone_number': args.phone_number}
    if args.name:
        options['name'] = args.name
    print_json(project.get_or_create_contact(options).to_dict())


def prepare_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Telerivet project client')
    parser.add_argument('--project', help='Project ID, defaults to TELERIVET_PROJECT_ID')
    parser.add_argument('--env-file', default='secrets.env', help='File to load credentials from')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Also log to this file')
    subparsers = parser.add_subparsers(dest='command')

    project = subparsers.add_parser('project', help='Show project fields')
    project.set_defaults(func=run_project)

    send = subparsers.add_parser('send', help='Send a message')
    send.set_defaults(func=run_send)
    send.add_argument('to_number', help='Phone number to send to')
    send.add_argument('content', help='Message content')
    send.add_argument('--route', help='ID of the phone or route to send from')

    schedule = subparsers.add_parser('schedule', help='Schedule a message')
    schedule.set_defaults(func=run_schedule)
    schedule.add_argument('to_number', help='Phone number to send to')
    schedule.add_argument('content', help='Message content')
    schedule.add_argument('offset', type=int, help='Seconds from now until the message is sent')

    contacts = subparsers.add_parser('contacts', help='List contacts')
    contacts.set_defaults(func=run_contacts)
    contacts.add_argument('--name-prefix', help='Only contacts whose name starts with this')
    contacts.add_argument('--limit', type=int, default=50, help='Maximum number of contacts')

    contact = subparsers.add_parser('contact', help='Get or create a contact')
    contact.set_defaults(func=run_contact)
    contact.add_argument('phone_number', help='Phone number of the contact')
    contact.add_argument('--name', help='Name to set on the contact')

    return parser


def main(argv: list = None) -> int:
    parser = prepare_parser()
    args = parser.parse_args(argv)
    if 'func' not in args:
        parser.print_usage()
        return 2

    setup_logging(args)
    try:
        config = ApiConfig.from_env(args.env_file)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 2
    with config.get_api() as api:
        try:
            args.func(api, get_project(api, config, args), args)
        except (TelerivetApiError, ValueError) as e:
            logger.debug('Command %s failed', args.command, exc_info=e)
            print(f'Error: {e}', file=sys.stderr)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
