"""Prompt templates for the AI flows."""

ATS_KEYWORD_OPTIMIZATION_PROMPT = """You are an expert ATS optimization tool.
Analyze the provided resume text and job description.

Resume:
{resume_text}

Job Description:
{job_description}

1. Identify and list important keywords and skills from the job description that are missing from the resume.
2. Suggest a list of relevant keywords to add to the resume based on the job description.
3. Provide an optimized version of the resume that strategically incorporates some of the missing keywords.
   Maintain the original format and tone of the resume as much as possible, keep one item per line,
   and keep section headers such as "Experience" or "Skills" on their own line.

Return your response as a single JSON object with three keys:
"missingKeywords" (array of strings), "suggestedKeywords" (array of strings) and "optimizedResume" (string)."""

SUMMARY_IMPROVEMENT_PROMPT = """You are an expert resume writer. Your task is to improve the summary section of the given resume.

Resume Text:
{resume_text}

Analyze the summary section (often the first paragraph) and rewrite it to be more impactful, concise,
and tailored for grabbing a recruiter's attention. If no clear summary exists, create one based on the
overall content of the resume.

Return a single JSON object with one key, "improvedSummary", holding the improved summary as a string."""

EXPERIENCE_IMPROVEMENT_PROMPT = """You are an expert career coach. Your task is to improve the work experience section of the given resume.

Resume Text:
{resume_text}

Analyze the work experience section. Rewrite the bullet points to be more impactful. Use strong action verbs,
quantify achievements where possible (even with estimates if necessary), and focus on results rather than
just responsibilities.

Return a single JSON object with one key, "improvedExperience", holding the entire rewritten work experience
section as a string."""
