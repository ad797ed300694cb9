"""测试配置和共享 Fixtures。"""

import pytest

from barter.models import BarterOffer, OfferStatus, SystemTaxonomy, TagMapping, UserProfile


# ============================================================================
# Mock Services
# ============================================================================

class MockLLMService:
    """测试用 Mock LLM 服务。

    可以通过设置 response 属性来控制返回值。
    可以通过设置 should_fail 来模拟失败。
    """

    def __init__(self):
        self.response = '{"title": "Test", "description": "Test body"}'
        self.should_fail = False
        self.call_count = 0
        self.last_prompt = None
        self.last_schema = None

    def call(self, prompt: str, *, json_mode: bool = False, response_schema=None) -> str:
        self.call_count += 1
        self.last_prompt = prompt
        self.last_schema = response_schema

        if self.should_fail:
            raise Exception("Mock LLM failure")

        return self.response


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def plumber() -> UserProfile:
    """创建示例用户：水管工，无兴趣。"""
    return UserProfile(id="u-plumber", name="Dana", main_field="Plumbing", interests=[])


@pytest.fixture
def designer() -> UserProfile:
    """创建示例用户：设计师，爱好吉他。"""
    return UserProfile(id="u-designer", name="Noa", main_field="Design", interests=["Guitar"])


@pytest.fixture
def admin_user() -> UserProfile:
    """创建管理员用户。"""
    return UserProfile(id="u-admin", name="Admin", main_field="Operations", role="admin")


# ============================================================================
# Offer / Taxonomy Fixtures
# ============================================================================

@pytest.fixture
def pipe_offer() -> BarterOffer:
    """需要水管工、提供记账帮助的报价（场景 A）。"""
    return BarterOffer(
        id="o-pipes",
        profile_id="other",
        status=OfferStatus.ACTIVE,
        receiving_tags=["pipe-repair"],
        giving_tags=["invoice-help"],
        title="Bookkeeping for a leaky sink",
    )


@pytest.fixture
def scenario_a_taxonomy() -> SystemTaxonomy:
    """场景 A 的标签映射。"""
    return SystemTaxonomy(tag_mappings={
        "pipe-repair": TagMapping("pipe-repair", mapped_categories=["Plumbing"]),
        "invoice-help": TagMapping("invoice-help", mapped_categories=["Accounting"]),
    })


@pytest.fixture
def mock_llm() -> MockLLMService:
    """创建 Mock LLM 服务。"""
    return MockLLMService()


@pytest.fixture
def mock_llm_with_offer_response(mock_llm: MockLLMService) -> MockLLMService:
    """创建返回报价 JSON 的 Mock LLM。"""
    mock_llm.response = '''{
        "title": "Website for a logo",
        "description": "I will build a landing page in exchange for a logo.",
        "offeredService": "Web development",
        "requestedService": "Logo design",
        "location": "Tel Aviv",
        "tags": ["web-dev", "logo-design"],
        "durationType": "one-time",
        "expirationDate": "2026-12-01"
    }'''
    return mock_llm
