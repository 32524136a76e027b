from conftest import AK47
from src.catalog import cards
from src.catalog.registry import ACTION_REGISTRY, Category


def test_weapon_card_scenario(region, soup_of):
    cards.render_items([AK47], cards.WEAPON, region)

    display = soup_of(region)
    found = display.find_all("div", class_="weapon")
    assert len(found) == 1
    card = found[0]
    assert card.h2.get_text() == "AK-47"
    lines = [p.get_text() for p in card.find_all("p")]
    assert lines == ["Category: Rifle", "Rarity: Classified"]
    span = card.find("span")
    assert span["style"] == "color: #d32ce6"
    assert span.get_text() == "Classified"
    img = card.img
    assert img["alt"] == "AK-47"
    assert img["src"] == "ak47.png"
    assert img["width"] == "300"


def test_empty_list_yields_empty_region(region, soup_of):
    region.replace(["<p>old</p>"])

    cards.render_items([], cards.STICKER, region)

    assert region.children == []
    assert soup_of(region).find_all(True) == []


def test_one_card_per_item_in_input_order(region):
    items = [{"name": "b"}, {"name": "a"}, {"name": "b"}]

    cards.render_items(items, cards.KEY, region)

    assert len(region.children) == 3
    assert [c.split("<h2>")[1].split("</h2>")[0] for c in region.children] == ["b", "a", "b"]


def test_missing_fields_degrade_to_empty_text(region, soup_of):
    cards.render_items([{"name": "Mystery"}, {"rarity": "not-a-mapping"}, "not-an-item"], cards.WEAPON, region)

    divs = soup_of(region).find_all("div", class_="weapon")
    assert len(divs) == 3
    assert [p.get_text() for p in divs[0].find_all("p")] == ["Category: ", "Rarity: "]
    assert divs[1].h2.get_text() == ""
    assert divs[2].img["alt"] == ""


def test_agent_and_crate_lines(region, soup_of):
    ACTION_REGISTRY[Category.AGENTS].render([{"name": "Sir Darryl", "team": {"name": "Terrorist"}, "image": "a.png"}], region)
    assert soup_of(region).find("div", class_="agent").p.get_text() == "Team: Terrorist"

    ACTION_REGISTRY[Category.CRATES].render([{"name": "Case", "type": "Case", "image": "c.png"}], region)
    display = soup_of(region)
    assert display.find("div", class_="agent") is None
    assert display.find("div", class_="crate").p.get_text() == "Type: Case"


def test_collection_and_key_cards_have_no_detail_lines(region, soup_of):
    cards.render_items([{"name": "The Arms Deal Collection", "image": "x.png"}], cards.COLLECTION, region)

    card = soup_of(region).find("div", class_="collection")
    assert card.find_all("p") == []
    assert card.img["width"] == "150"


def test_values_are_html_escaped(region, soup_of):
    cards.render_items([{"name": '<script>alert("x")</script>', "image": 'x.png" onerror="boom'}], cards.KEY, region)

    card = soup_of(region).find("div", class_="key")
    assert card.find("script") is None
    assert card.h2.get_text() == '<script>alert("x")</script>'
    assert card.img["src"] == 'x.png" onerror="boom'
    assert not card.img.has_attr("onerror")


def test_lookup_follows_nested_paths():
    assert cards.lookup({"rarity": {"name": "Covert"}}, "rarity.name") == "Covert"
    assert cards.lookup({"rarity": None}, "rarity.name") == ""
    assert cards.lookup({"team": {"name": {"nested": 1}}}, "team.name") == ""
    assert cards.lookup({"type": 3}, "type") == "3"
