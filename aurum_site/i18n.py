"""Localized UI strings.

Every piece of template copy lives in ``STRINGS``, keyed by language and then
by a dotted path (``"nav.collections"``). Renderers look strings up through a
:class:`Localizer` so that adding a language only touches this table.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping

__all__ = ["STRINGS", "LANGUAGE_META", "Localizer", "MissingStringError"]


class MissingStringError(KeyError):
    """Raised when a template asks for a key the table does not define."""
    pass


# Per-language document metadata
LANGUAGE_META: Dict[str, Dict[str, str]] = {
    "en": {
        "html_lang": "en",
        "hreflang": "en",
        "og_locale": "en_US",
        "label": "English",
    },
    "zh": {
        "html_lang": "zh-CN",
        "hreflang": "zh-CN",
        "og_locale": "zh_CN",
        "label": "中文",
    },
}


STRINGS: Dict[str, Dict[str, Any]] = {
    "en": {
        "nav": {
            "collections": "Collections",
            "craft": "Craft",
            "reviews": "Reviews",
            "service": "Service",
        },
        "hero": {
            "image_alt": "Luxury wristwatch on black background",
            "years": "Years",
            "heritage": "Design Heritage",
            "warranty": "International Warranty",
            "dispatch": "Dispatch Window",
        },
        "sections": {
            "collections": "Signature Collections",
            "collections_lead": "Curated lines for every moment — contemporary cases, sapphire crystal, and dependable movements.",
            "craft": "Crafted by Specialists",
            "craft_lead": "Each watch is assembled by a dedicated master and tested across 28 checkpoints for accuracy, durability, and finish.",
            "reviews": "Client Impressions",
            "reviews_lead": "Collectors from 40+ countries trust Aurum Atelier for design consistency and service.",
            "service": "Concierge-Level Service",
            "service_lead": "Dedicated advisors help you choose the right size, movement, and strap, with 24/7 multi-language support.",
        },
        "card": {
            "view": "View Details",
        },
        "craft": {
            "movements_title": "Precision Movements",
            "movements_copy": "Swiss-inspired automatic and quartz movements regulated to tight tolerances.",
            "materials_title": "Premium Materials",
            "materials_copy": "Sapphire crystal, 316L steel, and Italian leather straps.",
            "qc_title": "Small-Batch QC",
            "qc_copy": "Limited production runs ensure consistent finishing and alignment.",
            "receive_title": "What You Receive",
            "receive_copy": "Your watch arrives with a serialized certificate, quick-release strap tool, and a two-year international warranty.",
            "badge_delivery": "Free Worldwide Delivery",
            "badge_customs": "EU Customs-Cleared Shipping",
            "badge_support": "Live Chat & Phone Support",
        },
        "reviews": {
            "quote_1": "\"Balanced proportions and the lume is stunning. Shipping arrived in four days.\"",
            "city_1": "London",
            "quote_2": "\"The finishing rivals brands twice the price. Excellent support.\"",
            "city_2": "Hong Kong",
            "quote_3": "\"My Solstice Chrono became my daily watch. Comfortable and accurate.\"",
            "city_3": "New York",
        },
        "service": {
            "sizing_title": "Sizing Guidance",
            "sizing_copy": "Instant chat for wrist-size recommendations and strap swaps.",
            "warranty_title": "Global Warranty",
            "warranty_copy": "Two-year international coverage with local repair centers.",
            "payments_title": "Safe Payments",
            "payments_copy": "Encrypted checkout with cards, bank transfer, and digital wallets.",
            "faq_title": "Frequently Asked",
            "faq_delivery_q": "How long is delivery?",
            "faq_delivery_a": "Most orders ship within 48 hours and arrive in 4-8 business days.",
            "faq_straps_q": "Can I exchange straps?",
            "faq_straps_a": "Yes, quick-release straps are interchangeable across collections.",
            "faq_papers_q": "Do you provide authenticity papers?",
            "faq_papers_a": "Every watch includes a serialized certificate and care manual.",
        },
        "newsletter": {
            "title": "Join the Atelier",
            "copy": "Get early access to new launches, limited editions, and private events.",
            "placeholder": "Enter your email",
            "button": "Subscribe",
        },
        "footer": {
            "tagline": "Modern luxury watches with precision craftsmanship.",
            "shop": "Shop",
            "company": "Company",
            "contact": "Contact",
            "all": "All Watches",
            "limited": "Limited Editions",
            "concierge": "Watch Concierge",
            "craft": "Craftsmanship",
            "reviews": "Client Reviews",
            "warranty": "Warranty",
            "email": "concierge@aurumatelier.com",
            "phone": "+1 (888) 555-2188",
            "address": "Fifth Avenue, New York",
        },
        "product": {
            "breadcrumb_home": "Home",
            "breadcrumb_collections": "Collections",
            "highlights": "Key Highlights",
            "craft_title": "Craft & Finish",
            "box_title": "What’s in the Box",
            "reviews_title": "Collector Reviews",
            "faq_title": "Frequently Asked",
            "related_title": "Related Models",
            "consult_title": "Concierge Consultation",
            "consult_copy": "Share your wrist size and preferred strap. Our advisors reply within 12 hours.",
            "consult_button": "Request Consultation",
            "compare_label": "Includes international warranty, serialized certificate, and quick-release strap tool.",
            "delivery_title": "Delivery & Service",
            "delivery_copy": "Ships in 48 hours. EU customs-cleared routes available. 24/7 multi-language concierge support.",
            "inquire_button": "Inquire Now",
            "specs_button": "View Specifications",
        },
        "detail_craft": {
            "case_title": "Mirror-Grade Casework",
            "case_copy": "Multi-stage polishing delivers crisp reflections with hand-finished edges and precise alignment.",
            "crystal_title": "Sapphire Clarity",
            "crystal_copy": "Anti-reflective sapphire crystal keeps the dial clear in direct light and evening conditions.",
            "comfort_title": "Balanced Wearing Comfort",
            "comfort_copy": "Curved lugs and quick-release strap system keep the case secure and comfortable.",
        },
        "detail_box": {
            "certificate_title": "Serialized Certificate",
            "certificate_copy": "Each watch includes a numbered certificate and inspection card.",
            "tool_title": "Quick-Release Tool",
            "tool_copy": "Swap straps in seconds with the included tool and guide.",
            "case_title": "Protective Travel Case",
            "case_copy": "Keep your watch secure in a padded, compact carrying case.",
        },
        "detail_reviews": {
            "quote_1": "The finishing is impeccable and the lume is strong. Feels balanced on wrist.",
            "city_1": "Singapore",
            "quote_2": "Dial texture is outstanding. The movement keeps steady time.",
            "city_2": "Milan",
            "quote_3": "Fast delivery and great support. The strap system is super convenient.",
            "city_3": "Toronto",
        },
        "detail_faq": {
            "warranty_q": "Is the watch covered by warranty?",
            "warranty_a": "Yes, every piece includes a 2-year international warranty with local service options.",
            "shipping_q": "How long does shipping take?",
            "shipping_a": "Orders ship within 48 hours and typically arrive in 4-8 business days.",
            "strap_q": "Can I swap the strap?",
            "strap_a": "Yes, the quick-release system supports fast strap changes.",
        },
    },
    "zh": {
        "nav": {
            "collections": "系列",
            "craft": "工艺",
            "reviews": "评价",
            "service": "服务",
        },
        "hero": {
            "image_alt": "黑色背景上的腕表",
            "years": "年",
            "heritage": "设计沉淀",
            "warranty": "全球保修",
            "dispatch": "发货时效",
        },
        "sections": {
            "collections": "标志性系列",
            "collections_lead": "为每个场合打造 — 现代表壳、蓝宝石镜面与稳定机芯。",
            "craft": "匠心工艺",
            "craft_lead": "每只腕表由专属制表师装配，并通过 28 项精准与耐用测试。",
            "reviews": "客户评价",
            "reviews_lead": "来自 40+ 国家收藏者信赖 Aurum Atelier 的设计与服务。",
            "service": "腕表管家服务",
            "service_lead": "专属顾问帮助选择尺寸、机芯与表带，并提供 24/7 多语言支持。",
        },
        "card": {
            "view": "查看详情",
        },
        "craft": {
            "movements_title": "精准机芯",
            "movements_copy": "瑞士灵感机械与石英机芯，调校精准稳定。",
            "materials_title": "优质材质",
            "materials_copy": "蓝宝石镜面、316L 精钢与意大利皮表带。",
            "qc_title": "小批量品控",
            "qc_copy": "小批量生产确保细节一致与品质稳定。",
            "receive_title": "随表附赠",
            "receive_copy": "腕表含编号证书、快拆工具与 2 年国际保修。",
            "badge_delivery": "全球免邮",
            "badge_customs": "欧盟清关配送",
            "badge_support": "在线聊天与电话支持",
        },
        "reviews": {
            "quote_1": "“比例均衡，夜光非常惊艳，四天就收到了。”",
            "city_1": "伦敦",
            "quote_2": "“做工堪比两倍价位品牌，客服也很专业。”",
            "city_2": "香港",
            "quote_3": "“Solstice 计时款成了我的日常表，佩戴舒适且精准。”",
            "city_3": "纽约",
        },
        "service": {
            "sizing_title": "尺寸建议",
            "sizing_copy": "即时沟通腕围测量与表带更换建议。",
            "warranty_title": "全球保修",
            "warranty_copy": "2 年国际保障与本地维修网络。",
            "payments_title": "安全支付",
            "payments_copy": "加密结算，支持信用卡、转账与电子钱包。",
            "faq_title": "常见问题",
            "faq_delivery_q": "配送需要多久？",
            "faq_delivery_a": "大多数订单 48 小时内发货，4-8 个工作日送达。",
            "faq_straps_q": "可以更换表带吗？",
            "faq_straps_a": "可以，快拆表带适用于各系列。",
            "faq_papers_q": "提供真实性证书吗？",
            "faq_papers_a": "每只腕表均含编号证书与使用说明。",
        },
        "newsletter": {
            "title": "加入 Atelier",
            "copy": "抢先了解新品、限量款与私享活动。",
            "placeholder": "输入邮箱地址",
            "button": "订阅",
        },
        "footer": {
            "tagline": "现代奢华腕表，精准工艺之选。",
            "shop": "选购",
            "company": "品牌",
            "contact": "联系",
            "all": "全部腕表",
            "limited": "限量版",
            "concierge": "腕表管家",
            "craft": "匠心工艺",
            "reviews": "客户评价",
            "warranty": "保修政策",
            "email": "concierge@aurumatelier.com",
            "phone": "+1 (888) 555-2188",
            "address": "纽约第五大道",
        },
        "product": {
            "breadcrumb_home": "首页",
            "breadcrumb_collections": "系列",
            "highlights": "核心亮点",
            "craft_title": "工艺与质感",
            "box_title": "随表附赠",
            "reviews_title": "买家评价",
            "faq_title": "常见问题",
            "related_title": "相关推荐",
            "consult_title": "咨询购买",
            "consult_copy": "告诉我们你的腕围与表带偏好，我们将在 12 小时内回复。",
            "consult_button": "提交咨询",
            "compare_label": "含编号证书、快拆工具与 2 年国际保修服务。",
            "delivery_title": "配送与服务",
            "delivery_copy": "48 小时内发货，支持欧盟清关路线。7×24 多语言顾问在线。",
            "inquire_button": "咨询购买",
            "specs_button": "查看参数",
        },
        "detail_craft": {
            "case_title": "镜面级表壳",
            "case_copy": "多道抛光工序打造清晰反射面，边缘线条利落。",
            "crystal_title": "清晰读数",
            "crystal_copy": "蓝宝石镜面配合防眩镀膜，强光下依然清晰。",
            "comfort_title": "佩戴舒适",
            "comfort_copy": "弧形表耳与快拆表带让表壳更贴合手腕。",
        },
        "detail_box": {
            "certificate_title": "编号证书",
            "certificate_copy": "每只腕表配有编号证书与质检卡。",
            "tool_title": "快拆工具",
            "tool_copy": "随附表带快拆工具与使用指南。",
            "case_title": "旅行保护盒",
            "case_copy": "轻便防护收纳盒，日常携带更安心。",
        },
        "detail_reviews": {
            "quote_1": "抛光质感很高级，夜光效果特别亮。",
            "city_1": "新加坡",
            "quote_2": "表盘纹理很好看，走时稳定。",
            "city_2": "米兰",
            "quote_3": "物流很快，客服响应也很及时。",
            "city_3": "多伦多",
        },
        "detail_faq": {
            "warranty_q": "是否提供保修？",
            "warranty_a": "提供 2 年国际保修，可使用本地维修服务。",
            "shipping_q": "多久发货？",
            "shipping_a": "下单后 48 小时内发货，通常 4-8 个工作日送达。",
            "strap_q": "表带可更换吗？",
            "strap_a": "支持快拆表带系统，几秒即可完成更换。",
        },
    },
}


def _flatten(table: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in table.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{path}."))
        else:
            flat[path] = value
    return flat


class Localizer:
    """Read-only lookup of template strings by key and language.

    Usage:
        strings = Localizer()
        strings.resolve("nav.craft", "zh")   # -> "工艺"
        t = strings.bind("en")
        t("footer.shop")                     # -> "Shop"
    """

    def __init__(
        self,
        table: Mapping[str, Mapping[str, Any]] = STRINGS,
        meta: Mapping[str, Mapping[str, str]] = LANGUAGE_META,
    ) -> None:
        self._table = MappingProxyType(
            {lang: MappingProxyType(_flatten(entries)) for lang, entries in table.items()}
        )
        self._meta = MappingProxyType({lang: MappingProxyType(dict(m)) for lang, m in meta.items()})

    @property
    def languages(self) -> Iterable[str]:
        return tuple(self._table.keys())

    def resolve(self, key: str, lang: str) -> str:
        """Return the string for ``key`` in ``lang``.

        Raises:
            MissingStringError: If the language or key is unknown
        """
        try:
            return self._table[lang][key]
        except KeyError:
            raise MissingStringError(f"No '{lang}' string for '{key}'") from None

    def meta(self, lang: str, key: str) -> str:
        """Return document metadata (html lang, og locale, ...) for ``lang``."""
        try:
            return self._meta[lang][key]
        except KeyError:
            raise MissingStringError(f"No '{lang}' metadata for '{key}'") from None

    def bind(self, lang: str):
        """Return a one-argument lookup function for ``lang``."""
        def lookup(key: str) -> str:
            return self.resolve(key, lang)
        return lookup
