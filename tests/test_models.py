import pytest

from table_qr_relay.errors import ValidationError
from table_qr_relay.models import Printer, PrintJob, Table


def test_print_job_from_wire_names():
    job = PrintJob.from_dict({'data': 'https://t.me/x', 'tableName': 'A'})
    assert job.data == 'https://t.me/x'
    assert job.table_name == 'A'
    assert job.to_dict() == {'data': 'https://t.me/x', 'tableName': 'A'}


@pytest.mark.parametrize('body', [None, [], {'data': 'x'}, {'data': 'x', 'tableName': ''}])
def test_print_job_requires_both_fields(body):
    with pytest.raises(ValidationError) as exc:
        PrintJob.from_dict(body)
    assert exc.value.message == 'Missing data or tableName'


def test_printer_address():
    printer = Printer(host='192.168.31.20')
    assert printer.address == '192.168.31.20:9100'
    assert printer.to_dict() == {'host': '192.168.31.20', 'port': 9100, 'timeout': 10.0}


def test_table_round_trips_extra_fields():
    table = Table.from_dict({'id': 3, 'name': 'Patio', 'active': True})
    assert table.to_dict() == {'id': 3, 'name': 'Patio', 'active': True}


def test_table_without_name():
    assert Table.from_dict({'id': 4, 'name': None}).name == ''
    assert Table.from_dict({'id': 5}).name == ''
