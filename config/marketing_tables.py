"""
Static lookup tables shared by the prompt builder, the channel enrichment and
the postprocessor. Everything here is read-only; callers receive these objects
as default arguments and must not mutate them.
"""
from types import MappingProxyType

DEFAULT_MOTION = "ecom_checkout"


def _channel(channel, intent, role):
    return MappingProxyType({"channel": channel, "intent": intent, "role": role})


# --- Motion → channel templates (ordered by priority) ---
CHANNELS_BY_MOTION = MappingProxyType({
    "ecom_checkout": (
        _channel("Search", "High", "Capture"),
        _channel("Paid social", "Mid", "Spark demand"),
        _channel("Shopping feeds", "High", "Convert"),
        _channel("Email", "Mid", "Repeat purchase"),
        _channel("Content/SEO", "Low", "Educate"),
    ),
    "saas_checkout": (
        _channel("Search", "High", "Capture"),
        _channel("Paid social", "Mid", "Scale"),
        _channel("Content/SEO", "Mid", "Educate"),
        _channel("Email", "Mid", "Onboard"),
        _channel("Review sites", "Low", "Reassure"),
    ),
    "marketplace_checkout": (
        _channel("Marketplace adverts", "High", "Capture"),
        _channel("Search", "Mid", "Assist"),
        _channel("Paid social", "Mid", "Spark demand"),
        _channel("Retargeting", "Mid", "Nudge"),
        _channel("Email", "Low", "Repeat purchase"),
    ),
    "store_visit": (
        _channel("Local search", "High", "Drive visits"),
        _channel("Maps/GBP", "High", "Presence"),
        _channel("Local social", "Mid", "Awareness"),
        _channel("Email", "Mid", "Promote events"),
        _channel("Out-of-home", "Low", "Reach"),
    ),
    "call_now": (
        _channel("Call-extensions search", "High", "Click to call"),
        _channel("Local search", "High", "Capture"),
        _channel("Maps/GBP", "Mid", "Presence"),
        _channel("Retargeting", "Mid", "Nudge"),
        _channel("Local social", "Low", "Awareness"),
    ),
    "lead_capture": (
        _channel("Search", "High", "Capture"),
        _channel("Retargeting", "Mid", "Nudge"),
        _channel("Paid social", "Mid", "Generate demand"),
        _channel("Content/SEO", "Mid", "Educate"),
        _channel("Email", "Low", "Nurture"),
    ),
    "booking": (
        _channel("Search", "High", "Capture"),
        _channel("Local social", "Mid", "Presence"),
        _channel("Maps/GBP", "High", "Discovery"),
        _channel("Email", "Mid", "Rebook"),
        _channel("Referral", "Low", "Advocacy"),
    ),
    "saas_trial": (
        _channel("Search", "High", "Capture"),
        _channel("Content/SEO", "Mid", "Educate"),
        _channel("Paid social", "Mid", "Scale"),
        _channel("Email", "Mid", "Activate"),
        _channel("Review sites", "Low", "Reassure"),
    ),
    "saas_demo": (
        _channel("Search", "High", "Capture"),
        _channel("LinkedIn", "Mid", "Target accounts"),
        _channel("Content/SEO", "Mid", "Educate"),
        _channel("Email", "Mid", "Nurture"),
        _channel("Events/webinars", "Low", "Build trust"),
    ),
    "app_install": (
        _channel("App store adverts", "High", "Convert"),
        _channel("Paid social", "Mid", "Scale"),
        _channel("Search", "High", "Capture"),
        _channel("Influencers", "Mid", "Spark demand"),
        _channel("App store optimisation", "Low", "Discovery"),
    ),
    "donation": (
        _channel("Search", "High", "Capture intent"),
        _channel("Email", "Mid", "Appeal"),
        _channel("Paid social", "Mid", "Storytelling"),
        _channel("Partnerships", "Mid", "Amplify"),
        _channel("Content/SEO", "Low", "Educate"),
    ),
    "wholesale_inquiry": (
        _channel("Search", "High", "Capture B2B"),
        _channel("LinkedIn", "Mid", "Prospect"),
        _channel("Trade shows", "Mid", "Meet buyers"),
        _channel("Email", "Mid", "Nurture"),
        _channel("Content/SEO", "Low", "Educate"),
    ),
    "partner_recruitment": (
        _channel("Search", "High", "Capture partners"),
        _channel("Partnership outreach", "Mid", "Recruit"),
        _channel("LinkedIn", "Mid", "Prospect"),
        _channel("Email", "Mid", "Onboard"),
        _channel("Events/webinars", "Low", "Build trust"),
    ),
    "enrolment": (
        _channel("Search", "High", "Capture"),
        _channel("Paid social", "Mid", "Spark demand"),
        _channel("Content/SEO", "Mid", "Educate"),
        _channel("Email", "Mid", "Nurture"),
        _channel("Open days/events", "Low", "Convert"),
    ),
})

DEFAULT_GOAL = "Goal aligned to main action"

GOALS_BY_MOTION = MappingProxyType({
    "ecom_checkout": "Online orders",
    "saas_checkout": "Paid subscriptions",
    "marketplace_checkout": "Marketplace orders",
    "store_visit": "In-store sales",
    "call_now": "Bookings",
    "lead_capture": "Qualified leads",
    "booking": "Bookings",
    "saas_trial": "Qualified leads",
    "saas_demo": "Meetings booked",
    "app_install": "Installs with activation",
    "donation": "Donations",
    "wholesale_inquiry": "Wholesale purchase orders",
    "partner_recruitment": "Partner sign-ups",
    "enrolment": "Applications and enrolments",
    "custom": "Goal aligned to custom action",
})

MOTION_LABELS = MappingProxyType({
    "ecom_checkout": "buy online",
    "saas_checkout": "buy a subscription",
    "marketplace_checkout": "buy on a marketplace",
    "store_visit": "visit a shop or stockist",
    "call_now": "call now to order",
    "lead_capture": "request a quote or call-back",
    "booking": "book a service or appointment",
    "saas_trial": "start a free trial",
    "saas_demo": "book a demo with sales",
    "app_install": "install the app",
    "donation": "donate",
    "wholesale_inquiry": "make a wholesale or bulk enquiry",
    "partner_recruitment": "become a reseller or partner",
    "enrolment": "apply or enrol",
    "custom": "take the main action",
})

# --- Budget ---
BUDGET_BANDS = ("none", "low", "medium", "high")
DEFAULT_BUDGET_BAND = "low"
DEFAULT_BUDGET_SPLIT = (35, 25, 20, 15, 5)
MAX_CHANNELS = 5

# --- Channel playbook wording ---
SUCCESS_METRIC_BY_INTENT = MappingProxyType({
    "High": "Conversion rate and cost per acquisition against target",
    "Mid": "Engaged visits and assisted conversions",
    "Low": "Reach, share of voice and returning visitors",
})

GENERIC_KEY_ACTIONS = (
    "Set up conversion tracking before launch",
    "Launch two creative variants and test weekly",
    "Refine targeting using the first fortnight of data",
    "Review performance against the KPI dashboard every week",
)

# --- British English dialect map (US spelling → UK spelling) ---
DIALECT_TERMS = MappingProxyType({
    "ads": "adverts",
    "organization": "organisation",
    "organizations": "organisations",
    "organize": "organise",
    "organized": "organised",
    "realize": "realise",
    "realized": "realised",
    "color": "colour",
    "colors": "colours",
    "center": "centre",
    "centers": "centres",
    "analyze": "analyse",
    "analyzed": "analysed",
    "analyzing": "analysing",
    "optimize": "optimise",
    "optimized": "optimised",
    "optimizing": "optimising",
    "optimization": "optimisation",
    "behavior": "behaviour",
    "behaviors": "behaviours",
    "behavioral": "behavioural",
    "favor": "favour",
    "favors": "favours",
    "favored": "favoured",
    "favorite": "favourite",
    "favorites": "favourites",
    "honor": "honour",
    "labor": "labour",
    "flavor": "flavour",
    "flavors": "flavours",
    "neighborhood": "neighbourhood",
    "neighborhoods": "neighbourhoods",
    "traveled": "travelled",
    "traveling": "travelling",
    "canceled": "cancelled",
    "modeling": "modelling",
    "program": "programme",
    "programs": "programmes",
    "while": "whilst",
    "among": "amongst",
    "prioritize": "prioritise",
    "prioritized": "prioritised",
    "maximize": "maximise",
    "minimize": "minimise",
    "personalize": "personalise",
    "personalized": "personalised",
    "personalization": "personalisation",
    "customize": "customise",
    "customized": "customised",
    "utilize": "utilise",
    "catalog": "catalogue",
    "catalogs": "catalogues",
    "enrollment": "enrolment",
    "fulfillment": "fulfilment",
    "inquiry": "enquiry",
    "inquiries": "enquiries",
})

# --- Monetary redaction ---
MONETARY_KEYS = frozenset({
    "amount", "currency", "cost", "budget_total", "price",
    "spend", "investment", "fee", "payment",
})

CURRENCY_SYMBOLS = "£$€₹¥¢₽₨₩₪₡₦₴₵₸₼"

CURRENCY_CODES = ("USD", "AUD", "GBP", "EUR", "NZD", "CAD", "INR", "JPY", "SGD")
