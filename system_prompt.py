IMAGE_ANALYSIS_PROMPT = """\
Analyze this UI/design image and describe the layout, components, and visual elements in detail for HTML/CSS recreation. Focus on:
1. Overall layout structure and sections
2. Visual styling (colors, typography, spacing, shadows)
3. Interactive elements (buttons, forms, navigation)
4. Images and media elements
5. Any animations or hover effects visible

Additional context: {context}"""

HTML_PROMPT = """\
You are an expert web developer. Create a complete, standalone HTML file based on the following requirements:

CONTEXT:
{context}

REQUIREMENTS:
- Page/Component name: {name}
- Framework: {framework}
- Responsive design: {responsive}
- Include animations: {animations}
- Interactive elements: {interactive}

TECHNICAL REQUIREMENTS:
- Create ONE complete HTML file with everything inline
- Include ALL CSS in <style> tags in the <head>
- Include ALL JavaScript in <script> tags (if needed)
- Use semantic HTML5 elements
- Ensure the page is fully functional and self-contained
- Add proper meta tags for responsive design
{responsive_line}
{animations_line}
{interactive_line}

FRAMEWORK INSTRUCTIONS:
{framework_instructions}

IMPORTANT:
- Return ONLY the complete HTML code, no explanations
- Everything must be in ONE file (no external dependencies except CDN links if absolutely necessary)
- Use modern HTML5, CSS3, and vanilla JavaScript
- Ensure the code is clean, well-commented, and production-ready
- Add proper doctype, lang attribute, and meta tags

Generate the complete HTML file:"""

COMPONENT_PROMPT = """\
You are an expert React developer. Create a React component using {react_framework} based on the following requirements:

CONTEXT:
{context}

REQUIREMENTS:
- Component name: {name}
- React Framework: {react_framework}
- Responsive design: {responsive}
- Include animations: {animations}
- Interactive elements: {interactive}

{framework_instructions}

GENERAL REQUIREMENTS:
- Create a complete React functional component using TypeScript
- Export the component as default
- Use modern React hooks (useState, useEffect, etc.) if needed
- Make the component fully self-contained
- Include proper TypeScript types for props if needed
{responsive_line}
{animations_line}
{interactive_line}

IMPORTANT:
- Return ONLY the complete React component code, no explanations
- Use TypeScript syntax (.tsx)
- Follow the framework-specific patterns and best practices
- Ensure the component is production-ready and well-structured
{error_handling_line}
Generate the React component:"""

FRAMEWORK_INSTRUCTIONS = {
    "bootstrap": """\
- Use Bootstrap 5 CSS framework via CDN
- Include Bootstrap CSS: <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
- Include Bootstrap JS if needed: <script src="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/js/bootstrap.bundle.min.js"></script>
- Use Bootstrap classes for layout, components, and utilities
- Follow Bootstrap design system and component patterns""",
    "tailwind": """\
- Use Tailwind CSS via CDN
- Include Tailwind CSS: <script src="https://cdn.tailwindcss.com"></script>
- Use Tailwind utility classes for all styling
- Follow Tailwind design principles and responsive patterns
- Use Tailwind's color palette and spacing system""",
    "vanilla": """\
- Use pure HTML, CSS, and JavaScript (no external frameworks)
- Write custom CSS with modern features (Grid, Flexbox, CSS Variables)
- Use CSS custom properties for theming
- Implement responsive design with CSS media queries
- Keep all code self-contained and framework-free""",
}

COMPONENT_FRAMEWORK_INSTRUCTIONS = {
    "mui": """\
MATERIAL-UI (MUI) REQUIREMENTS:
- Import necessary components from '@mui/material'
- Import icons from '@mui/icons-material' if needed
- Use MUI's sx prop for styling and customization
- Use MUI's theme system with proper colors and spacing
- Import and use MUI components like Box, Typography, Button, Card, etc.
- Use MUI's breakpoints for responsive design: theme.breakpoints.down('md')
- Follow Material Design principles

EXAMPLE STRUCTURE:
```tsx
import React, { useState } from 'react';
import { Box, Typography, Button, Card, CardContent } from '@mui/material';
import { styled } from '@mui/material/styles';

const StyledContainer = styled(Box)(({ theme }) => ({
  padding: theme.spacing(3),
  [theme.breakpoints.down('md')]: {
    padding: theme.spacing(2),
  },
}));

const {ComponentName}: React.FC = () => {
  return (
    <StyledContainer>
      <Typography variant="h4" component="h1">
        Content
      </Typography>
    </StyledContainer>
  );
};
```""",
    "antd": """\
ANT DESIGN REQUIREMENTS:
- Import necessary components from 'antd'
- Import icons from '@ant-design/icons' if needed
- Use Ant Design's built-in styling system
- Use antd components like Layout, Typography, Button, Card, etc.
- Use antd's responsive utilities and breakpoints
- Follow Ant Design system principles
- Use antd's theme customization if needed

EXAMPLE STRUCTURE:
```tsx
import React, { useState } from 'react';
import { Layout, Typography, Button, Card, Space } from 'antd';
import type { FC } from 'react';

const { Content } = Layout;
const { Title, Text } = Typography;

const {ComponentName}: FC = () => {
  return (
    <Layout>
      <Content style={{ padding: '24px' }}>
        <Title level={1}>Content</Title>
      </Content>
    </Layout>
  );
};
```""",
    "tailwind": """\
TAILWIND CSS REQUIREMENTS:
- Use Tailwind utility classes for ALL styling
- No custom CSS or styled-components
- Use Tailwind's responsive prefixes (sm:, md:, lg:, xl:)
- Use Tailwind's color palette and spacing system
- Use Tailwind's flexbox and grid utilities
- Apply hover, focus, and other state variants
- Use Tailwind's animation utilities

EXAMPLE STRUCTURE:
```tsx
import React, { useState } from 'react';

const {ComponentName}: React.FC = () => {
  return (
    <div className="p-6 max-w-4xl mx-auto">
      <h1 className="text-3xl font-bold text-gray-900 mb-4">
        Content
      </h1>
    </div>
  );
};
```""",
    "styled-components": """\
STYLED-COMPONENTS REQUIREMENTS:
- Use styled-components for ALL styling (no CSS files)
- Import React and styled from 'styled-components'
- Define all styled components at the top after imports
- Use descriptive names for styled components (Container, Header, Button, etc.)
- Use template literals with CSS for styling
- Include hover states, transitions, and media queries as needed

EXAMPLE STRUCTURE:
```tsx
import React, { useState } from 'react';
import styled from 'styled-components';

const Container = styled.div`
  padding: 2rem;
  max-width: 1200px;
  margin: 0 auto;
`;

const Header = styled.h1`
  font-size: 2rem;
  color: #333;
`;

const {ComponentName}: React.FC = () => {
  return (
    <Container>
      <Header>Content</Header>
    </Container>
  );
};
```""",
}

PERPLEXITY_SYSTEM_PROMPT = (
    "You are a helpful AI assistant specialized in generating clean, modern HTML, "
    "CSS, and JavaScript code. Always return complete, functional code that works "
    "in modern browsers."
)

PERPLEXITY_HTML_SUFFIX = """

IMPORTANT: Return ONLY the complete HTML code, no explanations or markdown formatting. The HTML should be a complete, self-contained file with:
- DOCTYPE declaration
- All CSS in <style> tags in the <head>
- All JavaScript in <script> tags
- Modern, responsive design
- Clean, semantic HTML5 structure"""


def framework_instructions(framework):
    return FRAMEWORK_INSTRUCTIONS.get(framework, FRAMEWORK_INSTRUCTIONS["vanilla"])


def component_framework_instructions(react_framework):
    return COMPONENT_FRAMEWORK_INSTRUCTIONS.get(
        react_framework, COMPONENT_FRAMEWORK_INSTRUCTIONS["styled-components"]
    )


def _flag(value):
    return "true" if value else "false"


def build_html_prompt(context, requirements):
    return HTML_PROMPT.format(
        context=context,
        name=requirements.name,
        framework=requirements.framework,
        responsive=_flag(requirements.responsive),
        animations=_flag(requirements.animations),
        interactive=_flag(requirements.interactive),
        responsive_line="- Implement responsive design with CSS media queries" if requirements.responsive else "",
        animations_line="- Include smooth CSS animations and transitions" if requirements.animations else "",
        interactive_line="- Add JavaScript for interactive functionality" if requirements.interactive else "",
        framework_instructions=framework_instructions(requirements.framework),
    )


def build_component_prompt(context, requirements, include_error_handling=True):
    return COMPONENT_PROMPT.format(
        context=context,
        name=requirements.name,
        react_framework=requirements.react_framework,
        responsive=_flag(requirements.responsive),
        animations=_flag(requirements.animations),
        interactive=_flag(requirements.interactive),
        responsive_line="- Implement responsive design" if requirements.responsive else "",
        animations_line="- Include smooth animations and transitions" if requirements.animations else "",
        interactive_line="- Add proper event handlers and state management" if requirements.interactive else "",
        framework_instructions=component_framework_instructions(requirements.react_framework),
        error_handling_line="- Include proper error handling if needed\n" if include_error_handling else "",
    )


def build_image_analysis_prompt(description):
    return IMAGE_ANALYSIS_PROMPT.format(
        context=description or "No additional description provided"
    )


def with_html_suffix(prompt):
    return prompt + PERPLEXITY_HTML_SUFFIX


QUICK_TIPS = [
    {
        "title": "Website Layout",
        "color": "#4f46e5",
        "prompts": [
            {"title": "Header Component", "description": "Modern website header with navigation",
             "prompt": "Create a modern website header with logo, navigation menu, search bar, user account dropdown, and mobile hamburger menu. Include sticky positioning and smooth animations."},
            {"title": "Footer Component", "description": "Comprehensive website footer",
             "prompt": "Create a website footer with company info, quick links, social media icons, newsletter signup, contact information, and copyright notice. Include responsive grid layout."},
            {"title": "Landing Page Hero", "description": "Hero section for landing page",
             "prompt": "Create a hero section for a landing page with compelling headline, subtext, call-to-action buttons, background image/video, and animated elements."},
        ],
    },
    {
        "title": "Page Sections",
        "color": "#059669",
        "prompts": [
            {"title": "Features Section", "description": "Product features showcase",
             "prompt": "Create a features section with icon grid, feature cards, descriptions, and benefits. Include hover effects and responsive layout."},
            {"title": "Pricing Section", "description": "Pricing plans and packages",
             "prompt": "Create a pricing section with different plan tiers, feature comparisons, popular plan highlights, and call-to-action buttons."},
            {"title": "About Us Section", "description": "Company or team information",
             "prompt": "Create an about us section with company story, team member cards, mission statement, and achievements or statistics."},
        ],
    },
    {
        "title": "Buttons & Actions",
        "color": "#667eea",
        "prompts": [
            {"title": "Primary Button", "description": "Modern styled primary button",
             "prompt": "Create a modern primary button with hover effects, rounded corners, and gradient background. Include states for normal, hover, active, and disabled."},
            {"title": "Button Group", "description": "Set of related action buttons",
             "prompt": "Create a button group component with multiple action buttons (Save, Cancel, Delete). Include proper spacing, consistent styling, and different button variants."},
            {"title": "Call-to-Action Button", "description": "Attention-grabbing CTA button",
             "prompt": "Create a compelling call-to-action button with eye-catching design, animation effects, and persuasive styling to drive conversions."},
        ],
    },
    {
        "title": "Cards & Layouts",
        "color": "#10b981",
        "prompts": [
            {"title": "Product Card", "description": "E-commerce style product card",
             "prompt": "Create a product card component with image, title, price, rating, and add to cart button. Include hover effects and responsive design."},
            {"title": "Profile Card", "description": "User profile information card",
             "prompt": "Create a user profile card with avatar, name, title, contact information, and social media links. Include modern styling and animations."},
            {"title": "Dashboard Grid", "description": "Responsive dashboard layout",
             "prompt": "Create a responsive dashboard grid layout with multiple cards showing statistics, charts placeholders, and different card sizes."},
        ],
    },
    {
        "title": "Forms & Input",
        "color": "#f59e0b",
        "prompts": [
            {"title": "Login Form", "description": "User authentication form",
             "prompt": "Create a modern login form with email/username and password fields, remember me checkbox, forgot password link, and submit button. Include form validation styling."},
            {"title": "Contact Form", "description": "Multi-field contact form",
             "prompt": "Create a contact form with name, email, subject, and message fields. Include form validation, success/error states, and a submit button."},
            {"title": "Search Bar", "description": "Search input with suggestions",
             "prompt": "Create a search bar component with search icon, placeholder text, and dropdown suggestions. Include autocomplete styling and keyboard navigation."},
        ],
    },
    {
        "title": "Navigation",
        "color": "#8b5cf6",
        "prompts": [
            {"title": "Top Navigation", "description": "Header navigation bar",
             "prompt": "Create a top navigation bar with logo, menu items, user profile dropdown, and mobile hamburger menu. Include responsive design and smooth transitions."},
            {"title": "Sidebar Menu", "description": "Vertical navigation sidebar",
             "prompt": "Create a sidebar navigation menu with icons, menu items, collapsible sections, and active state indicators. Include smooth animations."},
            {"title": "Breadcrumb", "description": "Navigation breadcrumb trail",
             "prompt": "Create a breadcrumb navigation component showing the current page path with clickable links and separators."},
        ],
    },
    {
        "title": "Data Display",
        "color": "#ef4444",
        "prompts": [
            {"title": "Data Table", "description": "Sortable data table",
             "prompt": "Create a data table with sortable columns, search functionality, pagination, and row selection. Include modern styling and responsive design."},
            {"title": "Timeline", "description": "Vertical timeline component",
             "prompt": "Create a vertical timeline component showing events with dates, titles, descriptions, and icons. Include alternating layout and animations."},
            {"title": "Statistics Cards", "description": "KPI and metrics display",
             "prompt": "Create a set of statistics cards showing key metrics with numbers, percentages, trend indicators, and icons. Include different color themes."},
        ],
    },
    {
        "title": "Media & Content",
        "color": "#06b6d4",
        "prompts": [
            {"title": "Image Gallery", "description": "Responsive image grid",
             "prompt": "Create a responsive image gallery with grid layout, hover effects, lightbox modal, and image captions. Include loading states."},
            {"title": "Video Player", "description": "Custom video player",
             "prompt": "Create a custom video player with play/pause controls, progress bar, volume control, and fullscreen option. Include modern styling."},
            {"title": "Testimonial Section", "description": "Customer testimonials",
             "prompt": "Create a testimonial section with customer quotes, avatars, names, ratings, and carousel navigation. Include smooth transitions."},
        ],
    },
]
