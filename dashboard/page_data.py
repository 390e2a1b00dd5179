"""Static page data that does not come from the CSV resources."""

from csvdata.models import BubbleRecord, HeatCellRecord, TrendPointRecord

FUTURE_PROJECTIONS: list[TrendPointRecord] = [
    {"year": 2023, "value": 30, "label": "Generative AI adoption begins", "category": "Jobs Lost"},
    {"year": 2025, "value": 45, "label": "Routine task automation accelerates", "category": "Jobs Lost"},
    {"year": 2027, "value": 65, "label": "Mass transformation of knowledge work", "category": "Jobs Lost"},
    {"year": 2030, "value": 85, "label": "AI-powered automation mature", "category": "Jobs Lost"},

    {"year": 2023, "value": 20, "label": "AI knowledge jobs emerge", "category": "Jobs Created"},
    {"year": 2025, "value": 35, "label": "New AI-adjacent roles expand", "category": "Jobs Created"},
    {"year": 2027, "value": 60, "label": "AI integration specialists in demand", "category": "Jobs Created"},
    {"year": 2030, "value": 95, "label": "AI-native job ecosystem matures", "category": "Jobs Created"},

    {"year": 2023, "value": 15, "label": "Early adopters pursue reskilling", "category": "Workers Needing Reskilling"},
    {"year": 2025, "value": 30, "label": "Mid-career professionals affected", "category": "Workers Needing Reskilling"},
    {"year": 2027, "value": 40, "label": "Technical workforce transforms", "category": "Workers Needing Reskilling"},
    {"year": 2030, "value": 50, "label": "Half of global workforce reskilled", "category": "Workers Needing Reskilling"},
]

DOMAIN_SKILLS_HEATMAP: list[HeatCellRecord] = [
    {"x": "Finance", "y": "Data Processing", "value": 95, "tooltip": "Almost complete automation potential"},
    {"x": "Finance", "y": "Customer Service", "value": 75, "tooltip": "High automation with exception handling"},
    {"x": "Finance", "y": "Analysis", "value": 65, "tooltip": "Significant AI augmentation"},
    {"x": "Finance", "y": "Strategy", "value": 40, "tooltip": "Human oversight still critical"},
    {"x": "Finance", "y": "Relationship", "value": 25, "tooltip": "Human touch remains essential"},

    {"x": "Healthcare", "y": "Data Processing", "value": 90, "tooltip": "Records and data management automated"},
    {"x": "Healthcare", "y": "Customer Service", "value": 50, "tooltip": "Blend of AI and human touch needed"},
    {"x": "Healthcare", "y": "Analysis", "value": 45, "tooltip": "AI assisting with diagnostics"},
    {"x": "Healthcare", "y": "Strategy", "value": 20, "tooltip": "Human medical judgment essential"},
    {"x": "Healthcare", "y": "Relationship", "value": 10, "tooltip": "Patient care remains human-centered"},

    {"x": "Retail", "y": "Data Processing", "value": 95, "tooltip": "Inventory and ordering automated"},
    {"x": "Retail", "y": "Customer Service", "value": 80, "tooltip": "Most interactions handled by AI"},
    {"x": "Retail", "y": "Analysis", "value": 70, "tooltip": "AI-driven customer insights dominant"},
    {"x": "Retail", "y": "Strategy", "value": 50, "tooltip": "AI increasingly guiding business decisions"},
    {"x": "Retail", "y": "Relationship", "value": 40, "tooltip": "Personalized AI engagements growing"},

    {"x": "Education", "y": "Data Processing", "value": 85, "tooltip": "Administrative tasks automated"},
    {"x": "Education", "y": "Customer Service", "value": 40, "tooltip": "Student support partially automated"},
    {"x": "Education", "y": "Analysis", "value": 35, "tooltip": "Learning analytics AI-augmented"},
    {"x": "Education", "y": "Strategy", "value": 25, "tooltip": "Curriculum development human-guided"},
    {"x": "Education", "y": "Relationship", "value": 15, "tooltip": "Teacher-student bonds remain essential"},

    {"x": "Technology", "y": "Data Processing", "value": 90, "tooltip": "Data pipeline automation near-complete"},
    {"x": "Technology", "y": "Customer Service", "value": 75, "tooltip": "AI handling most technical support"},
    {"x": "Technology", "y": "Analysis", "value": 50, "tooltip": "Complex analysis human-AI collaboration"},
    {"x": "Technology", "y": "Strategy", "value": 35, "tooltip": "AI informing but not driving strategy"},
    {"x": "Technology", "y": "Relationship", "value": 30, "tooltip": "Client relationships increasingly digital"},
]

HEATMAP_COLOR_SCHEME = ["#EEF2FF", "#9381FF"]

BUBBLE_DATA: list[BubbleRecord] = [
    {"id": "1", "value": 85, "label": "Data Entry", "category": "Administrative", "description": "85% automation risk"},
    {"id": "2", "value": 80, "label": "Call Centers", "category": "Customer Service", "description": "80% automation risk"},
    {"id": "3", "value": 73, "label": "Bookkeeping", "category": "Finance", "description": "73% automation risk"},
    {"id": "4", "value": 69, "label": "Market Research", "category": "Marketing", "description": "69% automation risk"},
    {"id": "5", "value": 65, "label": "Software Dev", "category": "Technology", "description": "65% automation risk"},
    {"id": "6", "value": 58, "label": "Design", "category": "Creative", "description": "58% automation risk"},
    {"id": "7", "value": 50, "label": "Financial Analysis", "category": "Finance", "description": "50% automation risk"},
    {"id": "8", "value": 42, "label": "Radiology", "category": "Healthcare", "description": "42% automation risk"},
    {"id": "9", "value": 36, "label": "Content Creation", "category": "Creative", "description": "36% automation risk"},
    {"id": "10", "value": 26, "label": "Teaching", "category": "Education", "description": "26% automation risk"},
    {"id": "11", "value": 15, "label": "Nursing", "category": "Healthcare", "description": "15% automation risk"},
    {"id": "12", "value": 10, "label": "Therapy", "category": "Healthcare", "description": "10% automation risk"},
]

# Headline figures shown next to the trend chart
GENERATIVE_AI_IMPACT = 65
RESKILLING_NEED = 50
RESKILLING_ICON = "👨‍💼"

EMERGING_ROLES = [
    ("AI Ethics Specialist", "Ensuring ethical AI deployment"),
    ("Human-AI Collaboration Coach", "Optimizing human-AI teamwork"),
    ("Prompt Engineer", "Crafting optimal AI inputs"),
    ("AI Systems Interpreter", "Explaining AI decisions"),
    ("Automation Manager", "Overseeing AI-human workflows"),
]

# Nominal chart heights used on the page
PAGE_HEIGHTS = {"bar": 300, "bubble": 500, "heatmap": 500, "trend": 450}
GAUGE_SIZE = 200
