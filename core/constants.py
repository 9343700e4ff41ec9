"""
Constants and configuration values for clock export.
"""

# Default CSV header; must name the fields of the default row format in order
DEFAULT_CSV_HEADER = 'task,parents,category,start,end,effort,ishabit,tags'

# Joins ancestor titles in the parents column
DEFAULT_HEADLINE_SEPARATOR = '/'

# Joins inherited tags in the tags column
TAG_SEPARATOR = ':'

# Rendered value of the habit column
HABIT_FLAG_TRUE = 't'
HABIT_FLAG_FALSE = ''

# Value of the STYLE property that marks a habit
HABIT_STYLE = 'habit'

# Property drawer keys with a dedicated meaning
PROPERTY_KEYS = {
    'category': 'CATEGORY',
    'effort': 'EFFORT',
    'style': 'STYLE'
}

# Document keyword consulted for the default category
CATEGORY_KEYWORD = 'CATEGORY'

DEFAULT_TODO_KEYWORDS = ['TODO', 'NEXT', 'WAIT', 'HOLD', 'DONE', 'CANCELLED']

# Org syntax patterns
HEADLINE_PATTERN = r'^(\*+)\s+(.*?)\s*$'
TAGS_PATTERN = r'\s+(:(?:[\w@#%]+:)+)\s*$'
PRIORITY_PATTERN = r'^\[#[A-Za-z0-9]\]\s*'
KEYWORD_PATTERN = r'^#\+(\w+):\s*(.*?)\s*$'
BLOCK_BEGIN_PATTERN = r'^#\+begin_(\w+)'
BLOCK_END_PATTERN = r'^#\+end_(\w+)'
DRAWER_BEGIN_PATTERN = r'^:(\w+):\s*$'
DRAWER_END_PATTERN = r'^:END:\s*$'
PROPERTY_PATTERN = r'^:([^:\s]+):(?:\s+(.*?))?\s*$'
PLANNING_PATTERN = r'^(?:SCHEDULED|DEADLINE|CLOSED):'
CLOCK_PATTERN = r'^CLOCK:\s*(.*?)\s*$'
CLOCK_DURATION_PATTERN = r'\s*=>\s*(-?\d+:\d{2})\s*$'
LINK_PATTERN = r'\[\[([^\]]+)\](?:\[([^\]]+)\])?\]'

# <2023-01-01 Sun 09:00> or [2023-01-01 Sun 09:00]; weekday name is optional
TIMESTAMP_PATTERN = (
    r'([<\[])(\d{4})-(\d{2})-(\d{2})(?:\s+[^\s\d>\]]+)?'
    r'(?:\s+(\d{1,2}):(\d{2}))?[^>\]]*([>\]])'
)
