import pytest

from exceptions import MalformedInputError, NoDataError, UnsupportedFormatError
from parsers.csv_parser import CSVParser
from parsers.file_parser import FileParserFactory, get_file_type
from parsers.json_parser import JSONParser


def test_csv_parse_basic(sample_csv):
    rows = CSVParser().parse(sample_csv)
    assert len(rows) == 3
    assert rows[0] == {"id": "1", "age": "25"}
    assert rows[2] == {"id": "2", "age": ""}
    assert list(rows[0].keys()) == ["id", "age"]


def test_csv_trims_and_strips_quotes():
    rows = CSVParser().parse('"name" , "city"\n "Ada" ,"London"\r\n')
    assert rows == [{"name": "Ada", "city": "London"}]


def test_csv_drops_lines_with_wrong_field_count():
    text = "a,b,c\n1,2,3\n4,5\n6,7,8,9\n\n   \n10,11,12\n"
    parsed = CSVParser().read(text)
    non_blank = [line for line in text.split("\n") if line.strip()]
    assert len(parsed.rows) == len(non_blank) - 1 - 2
    assert parsed.skipped_rows == 2
    assert [row["a"] for row in parsed.rows] == ["1", "10"]


def test_csv_quoted_commas_are_not_special():
    # Splitting on every comma gives 3 fields, so the line is dropped
    parsed = CSVParser().read('name,city\n"Smith, John",Paris\nAda,Rome\n')
    assert parsed.rows == [{"name": "Ada", "city": "Rome"}]
    assert parsed.skipped_rows == 1


def test_csv_parse_is_idempotent(sample_csv):
    parser = CSVParser()
    assert parser.parse(sample_csv) == parser.parse(sample_csv)


def test_csv_rows_are_read_only(sample_csv):
    row = CSVParser().parse(sample_csv)[0]
    with pytest.raises(TypeError):
        row["id"] = "99"


def test_csv_accepts_bytes_with_bom():
    rows = CSVParser().parse("\ufeffid,v\n1,2\n".encode("utf-8"))
    assert rows == [{"id": "1", "v": "2"}]


@pytest.mark.parametrize("text", ["", "   \n\n  \n"])
def test_csv_empty_input_is_no_data(text):
    with pytest.raises(NoDataError):
        CSVParser().parse(text)


def test_csv_header_only_is_no_data():
    with pytest.raises(NoDataError):
        CSVParser().parse("id,name\n")


def test_csv_all_lines_mismatched_is_no_data():
    with pytest.raises(NoDataError):
        CSVParser().parse("a,b\n1\n2,3,4\n")


def test_csv_undecodable_bytes_are_malformed():
    with pytest.raises(MalformedInputError):
        CSVParser().parse(b"id,name\n1,\xff\xfe\xfa\n")


def test_json_array_of_objects(customers_json):
    rows = JSONParser().parse(customers_json)
    assert len(rows) == 4
    assert rows[1]["name"] is None
    assert rows[0]["spend"] == 120.5


def test_json_single_object_is_one_row():
    rows = JSONParser().parse('{"id": 7, "name": "solo"}')
    assert rows == [{"id": 7, "name": "solo"}]


def test_json_invalid_text_is_malformed_not_no_data():
    with pytest.raises(MalformedInputError) as exc_info:
        JSONParser().parse('[{"id": 1,}')
    assert not isinstance(exc_info.value, NoDataError)


def test_json_empty_array_is_no_data():
    with pytest.raises(NoDataError):
        JSONParser().parse("[]")


@pytest.mark.parametrize("text", ['[{"id": 1}, 2]', '["a", "b"]', '42', '[[1, 2]]'])
def test_json_non_object_records_are_rejected(text):
    with pytest.raises(MalformedInputError):
        JSONParser().parse(text)


def test_json_nan_constant_is_rejected():
    with pytest.raises(MalformedInputError):
        JSONParser().parse('[{"v": NaN}]')


@pytest.mark.parametrize("file_name,expected", [
    ("data.csv", CSVParser),
    ("DATA.CSV", CSVParser),
    ("records.json", JSONParser),
    ("archive.v2.Json", JSONParser),
])
def test_factory_selects_parser_by_extension(file_name, expected):
    assert isinstance(FileParserFactory().get_parser(file_name), expected)


@pytest.mark.parametrize("file_name", ["report.xlsx", "notes.txt", "", "noextension"])
def test_factory_rejects_other_formats(file_name):
    with pytest.raises(UnsupportedFormatError) as exc_info:
        FileParserFactory().get_parser(file_name)
    # Callers treat an unsupported format as "no data"
    assert isinstance(exc_info.value, NoDataError)


def test_get_file_type():
    assert get_file_type("a.b.CSV") == "csv"
    assert get_file_type("json") == "json"
    assert get_file_type(None) == ""
