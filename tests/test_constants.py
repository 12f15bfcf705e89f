from domquery import ACCEPTED_ATTRIBUTES, is_accepted_attribute, parse


def test_vocabulary_contents():
    assert "href" in ACCEPTED_ATTRIBUTES
    assert "data-*" in ACCEPTED_ATTRIBUTES
    assert len(set(ACCEPTED_ATTRIBUTES)) == len(ACCEPTED_ATTRIBUTES)


def test_is_accepted_attribute():
    assert is_accepted_attribute("onclick")
    assert is_accepted_attribute("HREF")
    assert is_accepted_attribute("data-user-id")
    assert not is_accepted_attribute("data-")
    assert not is_accepted_attribute("frobnicate")


def test_vocabulary_is_not_enforced():
    document = parse('<div frobnicate="yes"></div>')
    div = document.get_elements_by_tag_name("div")[0]
    assert div.has_attribute("frobnicate")
