"""
Load the default team roster, project showcase and testimonials.

Safe to run repeatedly: team members and projects are only inserted into
empty tables, and testimonials are matched by name.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from feedback.models import Feedback
from projects.models import Project
from team.models import TeamMember

UNSPLASH = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w={}&q=80"

TEAM_MEMBERS = [
    {
        "name": "Alex Rivera",
        "role": "Founder & Exploit Developer",
        "image": UNSPLASH.format("photo-1507003211169-0a1dd7228f2d", 774),
        "bio": "Former black hat with 15 years of experience in vulnerability research. "
               "Specializes in kernel exploitation and low-level security.",
        "order": 1,
    },
    {
        "name": "Mia Johnson",
        "role": "Reverse Engineer",
        "image": UNSPLASH.format("photo-1494790108377-be9c29b29330", 774),
        "bio": "Specializes in firmware analysis and embedded systems security. Has discovered "
               "critical vulnerabilities in IoT devices from major manufacturers.",
        "order": 2,
    },
    {
        "name": "Raj Patel",
        "role": "Web Security Specialist",
        "image": UNSPLASH.format("photo-1500648767791-00dcc994a43e", 774),
        "bio": "Expert in web application security and API vulnerabilities. Regular contributor "
               "to bug bounty programs with over 200 valid submissions.",
        "order": 3,
    },
    {
        "name": "Sophie Chen",
        "role": "Cryptography Expert",
        "image": UNSPLASH.format("photo-1580489944761-15a19d654956", 922),
        "bio": "PhD in Applied Mathematics with a focus on cryptographic implementations. Has "
               "identified weaknesses in several widely-used encryption protocols.",
        "order": 4,
    },
    {
        "name": "Marcus Wilson",
        "role": "Red Team Lead",
        "image": UNSPLASH.format("photo-1472099645785-5658abf4ff4e", 1740),
        "bio": "Former military intelligence with expertise in physical security and social "
               "engineering. Leads our comprehensive red team operations.",
        "order": 5,
    },
    {
        "name": "Elena Rodriguez",
        "role": "Malware Analyst",
        "image": UNSPLASH.format("photo-1544005313-94ddf0286df2", 776),
        "bio": "Specializes in reverse engineering malware and tracking threat actors. Has "
               "published research on several APT campaigns and nation-state threats.",
        "order": 6,
    },
]

PROJECTS = [
    {
        "title": "VulnScanner Pro",
        "date": "August 2023",
        "category": "Tool Release",
        "description": "Our latest open-source vulnerability scanner that combines static analysis with "
                       "dynamic testing to identify security flaws in web applications. Features custom "
                       "rule sets and integration with CI/CD pipelines.",
        "image": UNSPLASH.format("photo-1555949963-ff9fe0c870eb", 1740),
        "tags": ["Web Security", "OWASP", "Static Analysis", "Open Source"],
        "featured": True,
        "status": Project.STATUS_COMPLETED,
        "order": 1,
    },
    {
        "title": "SecureDrop 2.0",
        "date": "Q4 2023",
        "category": "Research",
        "description": "Enhanced secure file sharing system with post-quantum encryption and improved "
                       "metadata protection.",
        "image": UNSPLASH.format("photo-1563013544-824ae1b704d3", 1740),
        "tags": ["Encryption", "Privacy", "File Sharing"],
        "status": Project.STATUS_UPCOMING,
        "order": 2,
    },
    {
        "title": "Kernel Exploit Workshop",
        "date": "November 2023",
        "category": "Training",
        "description": "Hands-on workshop covering advanced kernel exploitation techniques for both "
                       "Windows and Linux systems.",
        "image": UNSPLASH.format("photo-1629654297299-c8506221ca97", 1674),
        "tags": ["Kernel", "Exploitation", "Training"],
        "status": Project.STATUS_UPCOMING,
        "order": 3,
    },
    {
        "title": "IoT Firmware Analysis Framework",
        "date": "May 2023",
        "category": "Tool Release",
        "description": "Automated framework for extracting, analyzing, and testing IoT firmware for "
                       "security vulnerabilities.",
        "image": UNSPLASH.format("photo-1518709268805-4e9042af2176", 1740),
        "tags": ["IoT", "Firmware", "Reverse Engineering"],
        "order": 4,
    },
    {
        "title": "APT Campaign Attribution Study",
        "date": "March 2023",
        "category": "Research",
        "description": "Comprehensive analysis of attribution techniques for Advanced Persistent "
                       "Threat campaigns.",
        "image": UNSPLASH.format("photo-1510511459019-5dda7724fd87", 1740),
        "tags": ["APT", "Threat Intelligence"],
        "order": 5,
    },
    {
        "title": "Web3 Security Challenges",
        "date": "January 2023",
        "category": "CTF",
        "description": "Set of blockchain and smart contract security challenges released to the community.",
        "image": UNSPLASH.format("photo-1639762681485-074b7f938ba0", 1740),
        "tags": ["Blockchain", "Smart Contracts", "CTF"],
        "order": 6,
    },
    {
        "title": "Memory Corruption Masterclass",
        "date": "November 2022",
        "category": "Training",
        "description": "Advanced training on memory corruption vulnerabilities and modern exploit mitigations.",
        "image": UNSPLASH.format("photo-1526374965328-7f61d4dc18c5", 1740),
        "tags": ["Exploit Dev", "Training"],
        "order": 7,
    },
]

TESTIMONIALS = [
    {
        "name": "John Doe",
        "email": "john.doe@demo.com",
        "role": "Security Analyst",
        "workplace": "TechCorp Inc.",
        "comment": "CyberPiT has significantly improved our security posture. The tools and insights "
                   "provided are invaluable for our daily operations.",
        "rating": 5,
        "featured": True,
    },
    {
        "name": "Jane Smith",
        "email": "jane.smith@demo.com",
        "role": "IT Manager",
        "workplace": "SecureNet Solutions",
        "comment": "The comprehensive approach to cybersecurity education and practical tools makes "
                   "CyberPiT a must-have resource.",
        "rating": 5,
        "featured": True,
    },
    {
        "name": "Mike Johnson",
        "email": "mike.johnson@demo.com",
        "role": "Penetration Tester",
        "workplace": "CyberGuard LLC",
        "comment": "Outstanding platform for staying updated with the latest security trends and techniques.",
        "rating": 5,
        "featured": True,
    },
    {
        "name": "Alex Chen",
        "email": "alex.chen@demo.com",
        "role": "Security Engineer",
        "workplace": "TechCorp",
        "comment": "CyberPiT's workshop on binary exploitation completely changed how I approach "
                   "security testing. Their techniques are cutting-edge.",
        "rating": 5,
    },
    {
        "name": "Sarah Johnson",
        "email": "sarah.johnson@demo.com",
        "role": "CISO",
        "workplace": "FinSecure",
        "comment": "We hired CyberPiT for a red team assessment and they found critical vulnerabilities "
                   "that our regular audits missed. Highly recommended.",
        "rating": 5,
    },
    {
        "name": "Marcus Williams",
        "email": "marcus.williams@demo.com",
        "role": "CTF Competitor",
        "workplace": "CTF Team",
        "comment": "The tools CyberPiT has released to the community have been invaluable for our CTF "
                   "team. Their approach is both practical and innovative.",
        "rating": 4,
    },
]


class Command(BaseCommand):
    help = "Insert the default team members, projects and testimonials when missing"

    @transaction.atomic
    def handle(self, *args, **opts):
        if TeamMember.objects.exists():
            self.stdout.write(f"Team already has {TeamMember.objects.count()} members, skipping")
        else:
            TeamMember.objects.bulk_create(TeamMember(**data) for data in TEAM_MEMBERS)
            self.stdout.write(self.style.SUCCESS(f"Created {len(TEAM_MEMBERS)} team members"))

        if Project.objects.exists():
            self.stdout.write(f"Showcase already has {Project.objects.count()} projects, skipping")
        else:
            Project.objects.bulk_create(Project(**data) for data in PROJECTS)
            self.stdout.write(self.style.SUCCESS(f"Created {len(PROJECTS)} projects"))

        created = 0
        for data in TESTIMONIALS:
            _, was_created = Feedback.objects.get_or_create(name=data["name"], defaults=data)
            created += int(was_created)
        self.stdout.write(self.style.SUCCESS(f"Created {created} testimonials"))
