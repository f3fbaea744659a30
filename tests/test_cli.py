from io import BytesIO
import json
import os
import zipfile
from click.testing import CliRunner
from ledger_export.config import CONFIG_FILENAME
from ledger_export.ledger_export import cli


TRANSACTIONS = [
    {'amount': 1, 'date': '2020-09-15', 'description': 'first',
     'policy_type': 'Household', 'household_id': 'mno5', 'name': 'stu7'},
    {'amount': 0, 'date': '2020-09-15', 'description': 'zero'},
    {'amount': -250, 'date': '2020-09-16', 'description': 'second',
     'entity_code': 'zyx9', 'account_number': 'kji4', 'block': 'team'},
]

ENTRIES = [
    {'type': 'NewCoverage', 'amount': -2500, 'date_submitted': '2021-03-02',
     'policy_type': 'Household', 'entity_code': 'MMB', 'household_id': '1234',
     'name': 'Jane Doe', 'policy_name': 'Doe household',
     'income_account': '4000', 'risk_category_name': 'Mobile',
     'risk_category_cc': 'MOB'},
    {'type': 'Claim', 'amount': 0, 'date_submitted': '2021-03-05',
     'policy_type': 'Team', 'entity_code': 'SIL', 'account_number': '12345',
     'cost_center': 'CC1', 'policy_name': 'Team A', 'income_account': '5000',
     'risk_category_name': 'Stationary', 'risk_category_cc': 'STA'},
]


def _write(path, data):
    with open(path, 'w') as f:
        json.dump(data, f)


def _read(path, mode='r'):
    with open(path, mode) as f:
        return f.read()


def _setup(path):
    """Write a transaction source, a ledger source and a config into path."""
    _write(os.path.join(path, 'in.json'), TRANSACTIONS)
    _write(os.path.join(path, 'ledger.json'), ENTRIES)
    _write(os.path.join(path, CONFIG_FILENAME),
           {'app_name': 'CoverApp', 'date_format': '%d %B %Y',
            'expense_account': 'EXP1'})
    return {name: os.path.join(path, name)
            for name in ('in.json', 'ledger.json', CONFIG_FILENAME,
                         'out.csv', 'out.zip')}


def test_init(tmp_path):
    work = str(tmp_path / 'work')
    result = CliRunner().invoke(cli, ['init', work])
    assert result.exit_code == 0
    assert os.path.exists(os.path.join(work, CONFIG_FILENAME))
    result = CliRunner().invoke(cli, ['init', work])
    assert result.exit_code == 1


def test_destinations():
    result = CliRunner().invoke(cli, ['destinations'])
    assert result.exit_code == 0
    assert result.output.split() == ['sage', 'sage-journal', 'policy',
                                     'netsuite']


def test_list(tmp_path):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, ['list', paths['in.json']])
    assert result.exit_code == 0
    assert 'first' in result.output
    assert 'zero' in result.output
    assert 'team' in result.output


def test_render_sage(tmp_path):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, [
        '--config', paths[CONFIG_FILENAME], 'render', 'sage',
        paths['in.json'], paths['out.csv'], '--date', '2020-09-30'])
    assert result.exit_code == 0, result.output
    assert '2 of 3 transactions' in result.output
    lines = _read(paths['out.csv']).splitlines()
    assert len(lines) == 5
    assert lines[2] == ('"1","000000","00001","","GL","JE","2020","09",0,'
                        '"September 2020 CoverApp JE","00",0,0,0,2')
    assert '"MC / stu7"' in lines[3]
    assert ',2.50,' in lines[4]


def test_render_refuses_overwrite(tmp_path):
    paths = _setup(str(tmp_path))
    runner = CliRunner()
    args = ['render', 'policy', paths['in.json'], paths['out.csv'],
            '--date', '2020-09-30']
    assert runner.invoke(cli, args).exit_code == 0
    result = runner.invoke(cli, args)
    assert result.exit_code == 1
    assert runner.invoke(cli, args + ['--force']).exit_code == 0


def test_render_netsuite(tmp_path):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, [
        'render', 'netsuite', paths['in.json'], paths['out.zip'],
        '--date', '2020-09-30'])
    assert result.exit_code == 0, result.output
    with zipfile.ZipFile(BytesIO(_read(paths['out.zip'], 'rb'))) as archive:
        assert sorted(archive.namelist()) == ['_2020-09-30.csv',
                                              'team_2020-09-30.csv']


def test_render_unknown_destination(tmp_path):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, ['render', 'quickbooks', paths['in.json'],
                                      paths['out.csv']])
    assert result.exit_code != 0
    assert not os.path.exists(paths['out.csv'])


def test_render_bad_config(tmp_path):
    paths = _setup(str(tmp_path))
    _write(paths[CONFIG_FILENAME], {'fiscal_start_month': 14})
    result = CliRunner().invoke(cli, ['--config', str(tmp_path), 'render',
                                      'sage', paths['in.json'],
                                      paths['out.csv']])
    assert result.exit_code == 1
    assert not os.path.exists(paths['out.csv'])


def test_render_verbose_logs(tmp_path, package_logger):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, [
        '-v', 'render', 'sage', paths['in.json'], paths['out.csv'],
        '--date', '2020-09-30'])
    assert result.exit_code == 0, result.output
    assert 'rendering SageBatch with 2 transactions' in result.output


def test_journal(tmp_path):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, [
        '--config', paths[CONFIG_FILENAME], 'journal', paths['ledger.json'],
        paths['out.csv'], '--date', '2021-04-01'])
    assert result.exit_code == 0, result.output
    assert '2 journal lines for 2 entries' in result.output
    lines = _read(paths['out.csv']).splitlines()
    assert len(lines) == 5
    assert lines[2] == ('"1","000000","00001","","GL","JE","2021","04",0,'
                        '"April 2021 CoverApp JE","00",0,0,0,2')
    assert lines[3].startswith('"2","000000","00001","0000000020","",0,'
                               '"EXP1","",25.00,')
    assert lines[4] == ('"2","000000","00001","0000000040","",0,"4000MOB",'
                        '"",-25.00,"2","Total MMB Mobile Premiums","",'
                        '20210401,"GL","JE"')


def test_statement(tmp_path):
    paths = _setup(str(tmp_path))
    result = CliRunner().invoke(cli, [
        '--config', paths[CONFIG_FILENAME], 'statement', paths['ledger.json'],
        paths['out.csv'], '--date', '2021-04-01'])
    assert result.exit_code == 0, result.output
    assert '1 of 2 entries' in result.output
    assert _read(paths['out.csv']).splitlines()[1:] == [
        '25.00,"Coverage premium: Add / Doe household","MC 1234 / Jane Doe",'
        '02 March 2021',
    ]


def test_journal_bad_entry(tmp_path):
    paths = _setup(str(tmp_path))
    _write(paths['ledger.json'], [{'type': 'Bogus', 'amount': 1,
                                   'date_submitted': '2021-03-02'}])
    result = CliRunner().invoke(cli, ['journal', paths['ledger.json'],
                                      paths['out.csv']])
    assert result.exit_code == 1
    assert not os.path.exists(paths['out.csv'])
