"""标签解析单元测试。"""

from barter.matching import resolve_tags
from barter.models import TagMapping


MAPPING = {
    "pipe-repair": TagMapping("pipe-repair", mapped_categories=["Plumbing"]),
    "music-lessons": TagMapping("music-lessons", mapped_interests=["Guitar", "Music"]),
    "handyman": TagMapping(
        "handyman",
        mapped_categories=["Plumbing", "Carpentry"],
        mapped_interests=["DIY"],
    ),
    "spam": TagMapping("spam", mapped_categories=["Marketing"], is_hidden=True),
}


class TestResolveTags:
    """测试 resolve_tags()。"""

    def test_unions_categories_and_interests(self):
        """测试多个标签的结果合并。"""
        resolved = resolve_tags(["pipe-repair", "music-lessons", "handyman"], MAPPING)

        assert resolved.categories == {"Plumbing", "Carpentry"}
        assert resolved.interests == {"Guitar", "Music", "DIY"}

    def test_unmapped_tags_are_skipped(self):
        """测试未映射标签不贡献任何结果。"""
        resolved = resolve_tags(["unknown", "pipe-repair"], MAPPING)

        assert resolved.categories == {"Plumbing"}
        assert resolved.interests == set()

    def test_duplicates_collapse(self):
        """测试重复标签被合并。"""
        resolved = resolve_tags(["pipe-repair", "pipe-repair"], MAPPING)

        assert resolved.categories == {"Plumbing"}

    def test_hidden_mapping_equals_no_mapping(self):
        """测试隐藏映射与没有映射等价。"""
        hidden = resolve_tags(["spam"], MAPPING)
        absent = resolve_tags(["spam"], {})

        assert hidden == absent
        assert hidden.categories == set()
        assert hidden.interests == set()

    def test_empty_inputs(self):
        """测试空输入和 None 不抛异常。"""
        assert resolve_tags([], MAPPING).categories == set()
        assert resolve_tags(None, MAPPING).interests == set()
        assert resolve_tags(["pipe-repair"], None).categories == set()

    def test_accepts_stored_dict_entries(self):
        """测试支持数据库原始 dict 形式的映射。"""
        mapping = {
            "yoga": {"mappedInterests": ["Wellness"]},
            "old": {"mappedCategories": ["Legacy"], "isHidden": True},
            "broken": {"mappedCategories": None},
        }

        resolved = resolve_tags(["yoga", "old", "broken"], mapping)

        assert resolved.interests == {"Wellness"}
        assert resolved.categories == set()

    def test_is_case_sensitive(self):
        """测试标签匹配区分大小写。"""
        resolved = resolve_tags(["Pipe-Repair"], MAPPING)

        assert resolved.categories == set()

    def test_string_valued_lists_are_not_split(self):
        """测试 mappedCategories 为单个字符串时按一个值处理，不拆成字符。"""
        mapping = {"t": {"mappedCategories": "Plumbing", "mappedInterests": "DIY"}}

        resolved = resolve_tags(["t"], mapping)

        assert resolved.categories == {"Plumbing"}
        assert resolved.interests == {"DIY"}

    def test_malformed_entries_are_ignored(self):
        """测试非 dict / 非 TagMapping 的条目被当作未映射。"""
        mapping = {
            "str-entry": "Plumbing",
            "list-entry": ["Plumbing"],
            "num-lists": {"mappedCategories": 7},
            "pipe-repair": {"mappedCategories": ["Plumbing"]},
        }

        resolved = resolve_tags(["str-entry", "list-entry", "num-lists", "pipe-repair"], mapping)

        assert resolved.categories == {"Plumbing"}
        assert resolved.interests == set()

    def test_non_string_tags_and_mapping_are_ignored(self):
        """测试非字符串标签和非 dict 映射表不抛异常。"""
        assert resolve_tags([["pipe-repair"], None, 3], MAPPING).categories == set()
        assert resolve_tags(["pipe-repair"], ["pipe-repair"]).categories == set()
