from fakerfactory import data


def test_has_values_for_known_pair():
    assert data.has_values("color", "zh_CN") is True


def test_has_values_for_unknown_key():
    assert data.has_values("color", "fr_FR") is False


def test_has_values_for_unknown_category():
    assert data.has_values("planet", "zh_CN") is False


def test_has_values_category_only():
    assert data.has_values("seat") is True
    assert data.has_values("planet") is False


def test_first_chinese_color():
    assert data.has_values("color", "zh_CN") is True
    assert data.DATA["color"]["zh_CN"][0] == "黑色"


def test_every_list_is_non_empty():
    for category, group in data.DATA.items():
        for key, values in group.items():
            assert len(values) > 0, (category, key)


def test_airline_info_matches_codes_and_names():
    assert data.has_values("flight", "airline_info") is True
    flights = data.DATA["flight"]
    assert len(flights["airline_info"]) == len(flights["airline_code"])
    for info, code, name in zip(
        flights["airline_info"], flights["airline_code"], flights["airline_name"]
    ):
        code_part, name_part = info.split(",")
        assert code_part == "code=" + code
        assert name_part == "name=" + name


def test_train_seat_letters_are_flight_letters():
    assert data.has_values("seat", "train") is True
    assert data.has_values("seat", "flight") is True
    assert set(data.SEATS["train"]) <= set(data.SEATS["flight"])


def test_simple_status_codes_are_general():
    # Integer lists are kept apart from the string lists that random picks use.
    assert data.has_values("status_code", "simple") is False
    codes = data.INT_DATA["status_code"]
    assert set(codes["simple"]) <= set(codes["general"])


def test_email_postfixes_start_with_at():
    assert data.has_values("email", "postfix") is True
    assert all(postfix.startswith("@") for postfix in data.DATA["email"]["postfix"])


def test_train_prefix_contains_empty_string():
    assert data.has_values("train", "prefix") is True
    assert "" in data.DATA["train"]["prefix"]