"""Management command to show what a click on a file would do."""

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from server.apps.explorer.actions import action_tag
from server.apps.explorer.infrastructure.navigation import ClientInstructions
from server.apps.explorer.logic.classifier import classify
from server.apps.explorer.logic.dispatcher import dispatch
from server.apps.explorer.logic.link_builder import LinkBuilder
from server.apps.explorer.records import FileRecord, NavigationContext


class Command(BaseCommand):
    """Classify a file record and print the resulting client instructions."""

    help = 'Explain how a click on a file or folder is resolved'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            'record',
            help='File record as JSON (backend camelCase keys)',
        )
        parser.add_argument(
            '--file-type',
            default=None,
            help='fileType of the current view (0, 1, 3, 6, 8)',
        )
        parser.add_argument(
            '--route',
            default=None,
            help='Name of the current route, e.g. share',
        )
        parser.add_argument(
            '--token',
            default='',
            help='Session token embedded in generated links',
        )
        parser.add_argument(
            '--origin',
            default='http://localhost:8000',
            help='Scheme and host used for absolute links',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Args:
            args: Positional arguments (unused).
            options: Command options.

        Raises:
            CommandError: If the record is not a JSON object.
        """
        try:
            payload = json.loads(options['record'])
        except json.JSONDecodeError as error:
            raise CommandError(f'Record is not valid JSON: {error}') from error
        if not isinstance(payload, dict):
            raise CommandError('Record must be a JSON object')

        record = FileRecord.from_api(payload)
        context = NavigationContext.from_query(
            {'fileType': options['file_type']},
            route_name=options['route'],
        )
        token = options['token']
        links = LinkBuilder(
            token_provider=lambda: token,
            origin=options['origin'],
        )

        action = classify(record, context, [record])
        instructions = ClientInstructions()
        handled = dispatch(action, links, instructions, instructions)

        self.stdout.write(f'Action: {action_tag(action)}')
        if not handled:
            self.stdout.write(self.style.WARNING('Click is ignored'))
            return

        self.stdout.write(json.dumps(instructions.as_list(), indent=2))
