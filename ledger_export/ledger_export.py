"""ledger_export CLI"""

import sys
import os
import datetime
import logging
import click
from tabulate import tabulate
from ledger_export import config as export_config
from ledger_export import batches, fileio, ledger, schema
from ledger_export.config import ConfigFile
from ledger_export.errors import ExportError
from ledger_export.formats.netsuite import NetSuiteBatch
from ledger_export.logging_setup import configure_logging


logger = logging.getLogger(__name__)


def _fatal(message):
    print('fatal: ' + message, file=sys.stderr)
    sys.exit(1)


def _fill(batch, records):
    for transaction, block in records:
        if isinstance(batch, NetSuiteBatch):
            batch.append(transaction, block)
        else:
            batch.append(transaction)
    return batch


@click.group()
@click.option('--config', 'config_path', envvar='LEDGER_EXPORT_CONFIG',
              type=click.Path(exists=True),
              help='config file, or a directory holding ledger-export.json')
@click.option('-v', '--verbose', count=True, help='more logging, repeatable')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Exports ledger transactions as accounting batch files."""
    level = {0: None, 1: logging.INFO}.get(verbose, logging.DEBUG)
    configure_logging(level)
    ctx.obj = config_path


def _load_config(ctx):
    try:
        return export_config.load(ctx.obj)
    except ExportError as e:
        _fatal(str(e))


@cli.command()
@click.argument('directory', type=click.Path(file_okay=False))
def init(directory):
    """Write a default config file into DIRECTORY"""
    os.makedirs(directory, exist_ok=True)
    cfg = ConfigFile(directory)
    if cfg.exists():
        _fatal('config already exists: ' + cfg.path)
    cfg.write_default()
    print(cfg.path)


@cli.command(name='destinations')
def destinations_cmd():
    """List supported destinations"""
    print('\n'.join(batches.destinations()))


@cli.command(name='list')
@click.argument('source', type=click.Path(exists=True, dir_okay=False))
def list_transactions(source):
    """List the transactions in SOURCE"""
    try:
        records = fileio.read_transactions(source)
    except ExportError as e:
        _fatal(str(e))
    rows = [[getattr(t, f) for f in schema.Transaction._fields] + [block]
            for t, block in records]
    print(tabulate(rows, headers=list(schema.Transaction._fields) + ['block']))


def _run_date(run_date):
    return run_date.date() if run_date else datetime.date.today()


def _write(output, data, content_type, force):
    try:
        fileio.write_payload(output, data, overwrite=force)
    except FileExistsError:
        _fatal('output already exists, use --force to replace it: ' + output)
    logger.info('wrote %d bytes of %s to %s', len(data), content_type, output)


date_option = click.option(
    '--date', 'run_date', type=click.DateTime(formats=['%Y-%m-%d']),
    help='reference date of the run, defaults to today')
force_option = click.option('--force', is_flag=True, help='overwrite OUTPUT')


@cli.command()
@click.argument('destination', type=click.Choice(batches.destinations()))
@click.argument('source', type=click.Path(exists=True, dir_okay=False))
@click.argument('output', type=click.Path(dir_okay=False))
@date_option
@click.option('--annual', is_flag=True, help='number rows as an annual batch')
@force_option
@click.pass_context
def render(ctx, destination, source, output, run_date, annual, force):
    """Render the transactions in SOURCE for DESTINATION into OUTPUT"""
    cfg = _load_config(ctx)
    date = _run_date(run_date)
    try:
        records = fileio.read_transactions(source)
        batch = _fill(batches.new_batch(destination, date, cfg, annual=annual),
                      records)
        data, content_type = batch.render()
    except ExportError as e:
        _fatal(str(e))
    _write(output, data, content_type, force)
    print(f'{len(batch)} of {len(records)} transactions written to {output}')


@cli.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False))
@click.argument('output', type=click.Path(dir_okay=False))
@date_option
@force_option
@click.pass_context
def journal(ctx, source, output, run_date, force):
    """Write a balanced journal batch for the ledger entries in SOURCE"""
    cfg = _load_config(ctx)
    try:
        entries = fileio.read_ledger_entries(source)
        batch = ledger.journal_batch(entries, _run_date(run_date), cfg)
        data, content_type = batch.render()
    except ExportError as e:
        _fatal(str(e))
    _write(output, data, content_type, force)
    print(f'{len(batch)} journal lines for {len(entries)} entries '
          f'written to {output}')


@cli.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False))
@click.argument('output', type=click.Path(dir_okay=False))
@date_option
@force_option
@click.pass_context
def statement(ctx, source, output, run_date, force):
    """Write the policyholder statement for the ledger entries in SOURCE"""
    cfg = _load_config(ctx)
    try:
        entries = fileio.read_ledger_entries(source)
        batch = ledger.policy_statement(entries, _run_date(run_date), cfg)
        data, content_type = batch.render()
    except ExportError as e:
        _fatal(str(e))
    _write(output, data, content_type, force)
    print(f'{len(batch)} of {len(entries)} entries written to {output}')


if __name__ == '__main__':
    cli()
