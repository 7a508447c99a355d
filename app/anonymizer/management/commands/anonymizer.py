# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Management command for user data anonymization.

Usage:
    python manage.py anonymizer analyze --uuid=<uuid> [--format=text|json]
    python manage.py anonymizer execute --uuid=<uuid> [--force] [--format=text|json]
    python manage.py anonymizer handlers
"""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, Any

from django.core.management.base import BaseCommand, CommandError
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from anonymizer import service
from anonymizer.exceptions import InvalidSubjectIdError, SubjectNotFoundError
from anonymizer.subject import validate_public_id
from anonymizer.utils.logger import setup_logging

if TYPE_CHECKING:
    from django.core.management.base import CommandParser

    from anonymizer.results import AggregateResult
    from anonymizer.subject import Subject

logger = setup_logging()

# Exit codes from sysexits.h
EX_UNSPECIFIED = 1
EX_USAGE = 64
EX_DATAERR = 65
EX_CONFIG = 78


class Command(BaseCommand):
    """Analyze or execute anonymization of a user, or list the handlers."""

    help = 'Anonymize personal data of a user across all configured handlers.'

    def add_arguments(self, parser: CommandParser) -> None:
        """Register the analyze, execute and handlers sub-commands."""
        subparsers = parser.add_subparsers(dest='action', required=True)

        analyze = subparsers.add_parser('analyze', help='Dry-run analysis of what would be anonymized.')
        execute = subparsers.add_parser('execute', help='Anonymize the user.')
        subparsers.add_parser('handlers', help='List the configured handlers.')

        for subparser in (analyze, execute):
            subparser.add_argument('-u', '--uuid', default='', help='UUID (RFC 4122 version 4) of the user.')
            subparser.add_argument(
                '-f',
                '--format',
                choices=('text', 'json'),
                default='text',
                help='Output format.',
            )

        execute.add_argument('--force', action='store_true', help='Skip the confirmation prompt.')

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ANN401, ARG002
        """Dispatch to the selected sub-command."""
        action = options['action']

        if action == 'handlers':
            self._list_handlers()
            return

        subject = self._resolve(options['uuid'])

        if action == 'analyze':
            self._analyze(subject, options['format'])
        else:
            self._execute(subject, options['format'], force=options['force'])

    def _resolve(self, uuid: str) -> Subject:
        """Validate the UUID, check the configuration and find the user."""
        if not uuid:
            message = 'UUID is required. Usage: manage.py anonymizer <analyze|execute> --uuid=<uuid>'
            raise CommandError(message, returncode=EX_USAGE)

        try:
            validate_public_id(uuid)
        except InvalidSubjectIdError as error:
            raise CommandError(str(error), returncode=EX_USAGE) from error

        if not service.handler_count():
            message = (
                'No anonymization handlers configured. '
                'Configure ANONYMIZER_HANDLERS in the settings to enable anonymization.'
            )
            raise CommandError(message, returncode=EX_CONFIG)

        try:
            return service.resolve(uuid)
        except SubjectNotFoundError as error:
            raise CommandError(str(error), returncode=EX_DATAERR) from error

    def _analyze(self, subject: Subject, output_format: str) -> None:
        """Run the dry-run analysis and print the result."""
        result = service.run_analyze(subject)

        if output_format == 'json':
            self._write_json(result)
        else:
            self._write_analysis(result, subject)

    def _execute(self, subject: Subject, output_format: str, *, force: bool) -> None:
        """Anonymize the user after the checks and the confirmation."""
        if service.is_subject_anonymized(subject):
            self.stderr.write(self.style.WARNING('User is already anonymized.'))
            return

        if not force:
            self.stdout.write(self.style.WARNING('WARNING: This action will permanently anonymize user data.'))
            self.stdout.write(f'User UUID: {subject.public_id}')

            answer = input('Do you want to proceed? (yes|no) [no]: ')
            if answer.strip().lower() not in ('y', 'yes'):
                self.stdout.write('Operation cancelled.')
                return

        result = service.run_execute(subject)
        logger.info('User anonymized via CLI: UUID=%s', subject.public_id)

        if output_format == 'json':
            self._write_json(result)
        else:
            self._write_execution(result, subject)

        if not result.success:
            message = f'Anonymization failed: {", ".join(result.errors)}'
            raise CommandError(message, returncode=EX_UNSPECIFIED)

    def _list_handlers(self) -> None:
        """Print the configured handlers in execution order."""
        handlers = service.list_handlers()

        if not handlers:
            message = 'No handlers configured. Configure ANONYMIZER_HANDLERS in the settings.'
            raise CommandError(message, returncode=EX_CONFIG)

        table = Table(title='Configured Anonymization Handlers', title_style='bold')
        table.add_column('#', style='cyan', justify='right')
        table.add_column('Handler', no_wrap=True)
        table.add_column('Description', style='dim')

        for number, (identity, description) in enumerate(handlers, start=1):
            table.add_row(str(number), identity, description)

        self._render(table)

    def _write_json(self, result: AggregateResult) -> None:
        self.stdout.write(json.dumps(result.to_dict(), indent=4))

    def _write_analysis(self, result: AggregateResult, subject: Subject) -> None:
        """Print the dry-run result as text."""
        is_anonymized = service.is_subject_anonymized(subject)

        summary = Table.grid(padding=(0, 2))
        summary.add_row('User UUID:', subject.public_id)
        summary.add_row('User ID:', str(subject.pk))
        summary.add_row('Already Anonymized:', '[yellow]Yes[/yellow]' if is_anonymized else '[green]No[/green]')
        summary.add_row('Handlers Executed:', str(result.executed_count))

        renderables: list[Any] = [Panel(summary, title='[bold]Anonymization Analysis (Dry-Run)[/bold]')]

        if result.updated_by_category:
            renderables.append(self._category_table('Records that would be updated', result.updated_by_category))

        for detail in result.details:
            renderables.append(
                self._category_table(detail.handler, detail.result.updated_by_category, caption=detail.description),
            )

        self._render(*renderables)
        self._write_errors(result)

    def _write_execution(self, result: AggregateResult, subject: Subject) -> None:
        """Print the anonymization result as text."""
        if result.success:
            title = '[bold green]Anonymization Completed[/bold green]'
        else:
            title = '[bold yellow]Anonymization Completed with Errors[/bold yellow]'

        summary = Table.grid(padding=(0, 2))
        summary.add_row('User UUID:', subject.public_id)
        summary.add_row('Handlers Executed:', str(result.executed_count))
        summary.add_row('Timestamp:', result.timestamp.isoformat())

        renderables: list[Any] = [Panel(summary, title=title)]
        if result.updated_by_category:
            renderables.append(self._category_table('Records Updated', result.updated_by_category))

        self._render(*renderables)
        self._write_errors(result)

    def _write_errors(self, result: AggregateResult) -> None:
        if result.errors:
            self.stderr.write('Errors:')
            for error in result.errors:
                self.stderr.write(f'  - {error}')

    @staticmethod
    def _category_table(title: str, counts: dict[str, int], caption: str | None = None) -> Group:
        """Build a category table headed by an unwrapped title line."""
        table = Table()
        table.add_column('Category', style='cyan')
        table.add_column('Records', justify='right', style='green')

        for category, count in counts.items():
            table.add_row(category, str(count))

        heading = [Text(title, style='bold', no_wrap=True, overflow='ignore')]
        if caption:
            heading.append(Text(caption, style='dim'))

        return Group(*heading, table)

    def _render(self, *renderables: Any) -> None:  # noqa: ANN401
        """Render Rich output through the command's stdout wrapper."""
        console = Console(file=io.StringIO(), record=True, width=100)
        for renderable in renderables:
            console.print(renderable)

        self.stdout.write(console.export_text(styles=self.stdout.isatty()), ending='')
