from utils.inflector import classify


def test_classify_single_word():
    assert classify("sql_adapter") == "SqlAdapter"


def test_classify_multi_word():
    assert classify("pg_json_thing_adapter") == "PgJsonThingAdapter"


def test_classify_skips_empty_parts():
    assert classify("_adapter") == "Adapter"
    assert classify("mySql__adapter") == "MysqlAdapter"


def test_classify_capitalizes_each_word():
    assert classify("SQL_adapter") == "SqlAdapter"
    assert classify("pgJSON_adapter") == "PgjsonAdapter"
