"""
Default site content inserted into an empty database.

Edit the rows directly in the database afterwards; the server never writes
them again once any content exists.
"""
from datetime import date

SETTINGS = {
    "site_name": "Amir Hossein",
    "owner_name": "Amir Hossein",
    "tagline": "Machine learning researcher and software engineer",
    "email": "hello@example.com",
    "location": "Toronto, Canada",
    "github_url": "https://github.com/example",
    "linkedin_url": "https://www.linkedin.com/in/example",
    "scholar_url": "https://scholar.google.com/citations?user=example",
    "footer_note": "Built with Flask and PostgreSQL.",
}

ABOUT_PARAGRAPHS = [
    "I build <strong>reliable machine learning systems</strong> and study how "
    "models behave once they leave the lab.",
    "My research looks at robustness under distribution shift, efficient "
    "fine-tuning, and evaluation methods that hold up in production.",
    "Outside of work I write about tooling, teach the occasional workshop, "
    "and contribute to open-source Python libraries.",
]

SKILL_GROUPS = [
    {"name": "Languages", "skills": ["Python", "Go", "SQL", "TypeScript"]},
    {"name": "Machine Learning", "skills": ["PyTorch", "scikit-learn", "Hugging Face", "JAX"]},
    {"name": "Infrastructure", "skills": ["PostgreSQL", "Docker", "Kubernetes", "GitHub Actions"]},
]

TRUST_BADGES = [
    {"label": "AWS Certified Machine Learning – Specialty", "issuer": "Amazon Web Services", "year": "2023",
     "url": "https://aws.amazon.com/certification/"},
    {"label": "Best Paper Award", "issuer": "Workshop on Robust ML", "year": "2022", "url": ""},
    {"label": "Open-source maintainer", "issuer": "Python Software Foundation community", "year": "2021",
     "url": ""},
]

BLOG_POSTS = [
    {
        "slug": "evaluating-models-after-deployment",
        "title": "Evaluating models after deployment",
        "published_on": date(2024, 5, 12),
        "summary": "Offline metrics drift away from what users see. Here is how I track the gap.",
        "body_html": "<p>Offline benchmarks are a starting point, not a verdict.</p>"
                     "<p>This post walks through shadow evaluation, slice metrics, and alerting.</p>",
        "url": "",
    },
    {
        "slug": "postgres-for-ml-metadata",
        "title": "PostgreSQL as an ML metadata store",
        "published_on": date(2023, 11, 3),
        "summary": "A plain relational database goes a long way before you need a feature store.",
        "body_html": "<p>Tables for runs, datasets, and artifacts cover most experiment tracking needs.</p>",
        "url": "",
    },
]

RESEARCH_ITEMS = [
    {
        "slug": "shift-aware-finetuning",
        "title": "Shift-Aware Fine-Tuning for Tabular Models",
        "venue": "NeurIPS Workshop on Distribution Shifts",
        "year": "2023",
        "summary": "Adapting pretrained tabular models to covariate shift with a handful of labelled examples.",
        "tags": "robustness, tabular, fine-tuning",
    },
    {
        "slug": "calibrated-retrieval",
        "title": "Calibrated Confidence for Retrieval-Augmented Generation",
        "venue": "ACL Findings",
        "year": "2024",
        "summary": "Estimating when a retrieval-augmented model should abstain instead of answering.",
        "tags": "nlp, calibration, retrieval",
    },
]

RESEARCH_PAGES = [
    {
        "slug": "shift-aware-finetuning",
        "title": "Shift-Aware Fine-Tuning for Tabular Models",
        "subtitle": "Few-shot adaptation under covariate shift",
        "venue": "NeurIPS Workshop on Distribution Shifts",
        "year": "2023",
        "authors": "Amir Hossein, J. Doe",
        "abstract": "Tabular models degrade quietly when feature distributions move. We propose a "
                    "fine-tuning objective that reweights a small labelled target sample.",
        "body_html": "<h2>Method</h2><p>We estimate density ratios between source and target "
                     "features and use them to reweight the fine-tuning loss.</p>"
                     "<h2>Results</h2><p>Across eight benchmarks the method recovers most of the "
                     "accuracy lost to shift using fewer than 100 target labels.</p>",
        "paper_url": "https://arxiv.org/abs/0000.00000",
        "code_url": "https://github.com/example/shift-aware-finetuning",
    },
    {
        "slug": "calibrated-retrieval",
        "title": "Calibrated Confidence for Retrieval-Augmented Generation",
        "subtitle": "Knowing when not to answer",
        "venue": "ACL Findings",
        "year": "2024",
        "authors": "Amir Hossein, A. Smith, R. Lee",
        "abstract": "We study confidence estimation for retrieval-augmented generation and show "
                    "that retrieval scores alone are poorly calibrated.",
        "body_html": "<h2>Approach</h2><p>A lightweight verifier combines retrieval agreement "
                     "with token-level uncertainty.</p>",
        "paper_url": "https://arxiv.org/abs/0000.00001",
        "code_url": "",
    },
]

EXPERIENCES = [
    {
        "role": "Machine Learning Engineer",
        "organization": "Acme Analytics",
        "location": "Toronto, Canada",
        "start_label": "Jan 2023",
        "end_label": "",
        "description_html": "<ul><li>Own the model evaluation platform.</li>"
                            "<li>Cut inference cost by 40% with distillation.</li></ul>",
    },
    {
        "role": "Graduate Research Assistant",
        "organization": "University of Toronto",
        "location": "Toronto, Canada",
        "start_label": "Sep 2020",
        "end_label": "Dec 2022",
        "description_html": "<p>Research on robustness of tabular and language models.</p>",
    },
    {
        "role": "Software Engineer",
        "organization": "Northwind Systems",
        "location": "Remote",
        "start_label": "Jun 2018",
        "end_label": "Aug 2020",
        "description_html": "<p>Built data pipelines and internal APIs in Python and Go.</p>",
    },
]
