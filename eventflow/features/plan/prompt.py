def build_event_plan_prompt(*, name: str, age: str, gender: str, event_type: str) -> str:
    return f"""
Act as an expert event planner. Plan an event with the following details:
- Name of person: {name}
- Age: {age}
- Gender: {gender}
- Event Type: {event_type}

Please generate a JSON object containing specific suggestions.
The JSON must strictly follow this schema:
{{
  "theme_suggestions": ["string", "string", "string"],
  "activities": ["string", "string", "string", "string"],
  "todo_list": ["string", "string", "string", "string", "string"],
  "gift_ideas": ["string", "string", "string", "string"]
}}

Make the suggestions age-appropriate, creative, and fun.
Return ONLY the raw JSON string. Do not use Markdown formatting.
""".strip()
