"""
baser - command line interface for the baserCMS Web API.

Commands for:
- Contents, navigation and breadcrumbs
- Content folders and pages
- Search index
- Blog contents and posts
- Admin login
"""

import functools
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import click
import requests

from . import __version__, __prog_name__
from .api import BaserClient, create_admin_client
from .config import BaserConfig, ConfigManager, get_config_manager
from .exceptions import AuthenticationError, BaserError
from .utils import (
    OutputFormat,
    mask_secret,
    print_error,
    print_info,
    print_json,
    print_record,
    print_records,
    print_success,
    setup_logging,
)

logger = logging.getLogger(__name__)

STATUS_CHOICE = click.Choice(["publish", "all"])

CONTENT_COLUMNS = ["id", "type", "title", "url", "parent_id", "status"]
FOLDER_COLUMNS = ["id", "folder_template", "page_template", "created"]
PAGE_COLUMNS = ["id", "page_template", "created", "modified"]
SEARCH_COLUMNS = ["id", "type", "title", "url", "priority"]
BLOG_CONTENT_COLUMNS = ["id", "template", "list_count", "tag_use", "comment_use"]
BLOG_POST_COLUMNS = ["id", "no", "title", "posted", "status"]


# ============================================================================
# CLI Context and Common Options
# ============================================================================

class BaserContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config_manager: ConfigManager = None  # type: ignore[assignment]
        self.server_url: Optional[str] = None
        self.no_verify_ssl: bool = False

    def get_config(self) -> BaserConfig:
        """Effective configuration with command line overrides applied."""
        config = self.config_manager.get()
        if self.server_url:
            config.server_url = self.server_url
        if self.no_verify_ssl:
            config.verify_ssl = False
        return config

    def create_client(self) -> BaserClient:
        """Create an anonymous client for the configured server."""
        config = self.get_config()
        return BaserClient(config.server_url, config.verify_ssl)


pass_context = click.make_pass_decorator(BaserContext, ensure=True)


def common_options(f):
    """Common options for all commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice(['table', 'json']),
        default='table',
        help='Output format'
    )(f)
    return f


def require_config(f):
    """Decorator to require a configured server."""
    @functools.wraps(f)
    def wrapper(ctx: BaserContext, *args, **kwargs):
        if not ctx.get_config().is_configured():
            print_error(
                "Server URL not configured.",
                "Pass --server or set BASER_SERVER_URL."
            )
            sys.exit(1)
        return f(ctx, *args, **kwargs)

    return wrapper


def run_request(ctx: BaserContext, call: Callable[[BaserClient], Any]) -> Any:
    """
    Run one client call, exiting with status 1 on failure.

    Args:
        ctx: CLI context
        call: Function receiving the client
    """
    try:
        with ctx.create_client() as client:
            return call(client)
    except BaserError as e:
        print_error(str(e), e.details)
        sys.exit(1)
    except requests.HTTPError as e:
        response = e.response
        status = response.status_code if response is not None else "?"
        url = response.url if response is not None else ""
        print_error(f"HTTP {status} from server", url or None)
        sys.exit(1)
    except requests.RequestException as e:
        print_error(f"Request failed: {e}")
        sys.exit(1)


def _show_list(ctx, verbose, quiet, output_format, call, columns, title):
    setup_logging(verbose, quiet)
    records = run_request(ctx, call)
    print_records(records, columns, OutputFormat(output_format), None if quiet else title)


def _show_one(ctx, verbose, quiet, output_format, call):
    setup_logging(verbose, quiet)
    record = run_request(ctx, call)
    print_record(record, OutputFormat(output_format))


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--server', '-s',
    envvar='BASER_SERVER_URL',
    help='baserCMS server URL (e.g. https://example.com)'
)
@click.option(
    '--no-verify-ssl',
    is_flag=True,
    help='Disable TLS certificate verification (self-signed dev servers)'
)
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    envvar='BASER_CONFIG_FILE',
    help='Custom configuration file'
)
@click.pass_context
def cli(ctx, server: Optional[str], no_verify_ssl: bool, config_file: Optional[Path]):
    """
    baser - baserCMS Web API client.

    Reads contents, pages, blog posts and the search index of a
    baserCMS 5 site.

    \b
    Quick Start:
      1. List contents:     baser -s https://example.com contents list
      2. Show a page:       baser -s https://example.com pages get 2
      3. Recent posts:      baser -s https://example.com blog posts --limit 5

    \b
    Environment Variables:
      BASER_SERVER_URL   - Server URL
      BASER_VERIFY_SSL   - Set to "false" to skip TLS verification
      BASER_EMAIL        - Login email
      BASER_PASSWORD     - Login password
      BASER_CONFIG_FILE  - Custom configuration file
    """
    ctx.ensure_object(BaserContext)
    ctx.obj.config_manager = get_config_manager(config_file)
    ctx.obj.server_url = server
    ctx.obj.no_verify_ssl = no_verify_ssl


@cli.command('config')
@pass_context
def show_config(ctx: BaserContext):
    """Show the effective configuration."""
    config = ctx.get_config()
    click.echo("\nCurrent Configuration:")
    click.echo(f"  Server URL:   {config.server_url or '(not configured)'}")
    click.echo(f"  Verify SSL:   {config.verify_ssl}")
    click.echo(f"  Email:        {config.email or '(not set)'}")
    click.echo(f"  Password:     {mask_secret(config.password)}")
    click.echo(f"  Config Path:  {ctx.config_manager.get_config_path()}")


@cli.command('login')
@click.option('--email', '-e', help='Login email')
@click.option('--password', '-p', help='Password (will prompt if not provided)')
@click.option('--show-token', is_flag=True, help='Print the access token')
@common_options
@pass_context
@require_config
def login(
    ctx: BaserContext,
    email: Optional[str],
    password: Optional[str],
    show_token: bool,
    verbose: bool,
    quiet: bool,
    output_format: str
):
    """
    Log in to the admin API and check the credentials.

    The token is not stored; use --show-token to print it.

    \b
    Examples:
      baser login -e admin@example.com
      baser login --show-token --format json
    """
    setup_logging(verbose, quiet)
    config = ctx.get_config()

    email = email or config.email or click.prompt("Email")
    password = password or config.password or click.prompt("Password", hide_input=True)

    if not quiet:
        print_info(f"Authenticating to {config.server_url}...")

    try:
        with create_admin_client(config.server_url, email, password, config.verify_ssl) as client:
            token = client.token
    except AuthenticationError as e:
        print_error(f"Login failed: {e}")
        sys.exit(1)
    except requests.RequestException as e:
        print_error(f"Login failed: {e}")
        sys.exit(1)

    if OutputFormat(output_format) == OutputFormat.JSON:
        print_json({"authenticated": True, "access_token": token if show_token else None})
        return

    print_success("Login successful!")
    if show_token:
        click.echo(token)


# ============================================================================
# Content Commands
# ============================================================================

@cli.group('contents')
def contents():
    """Contents and navigation."""
    pass


@contents.command('list')
@common_options
@click.option('--limit', '-n', type=int, help='Items per page')
@click.option('--page', type=int, help='Page number')
@click.option('--status', type=STATUS_CHOICE, help='Published only, or all')
@click.option('--type', 'content_type', help='Content type (Page, ContentFolder, ...)')
@click.option('--site-id', type=int, help='Site ID')
@click.option('--parent-id', type=int, help='Parent content ID')
@click.option('--author-id', type=int, help='Author user ID')
@click.option('--folder-id', type=int, help='All contents below this folder')
@click.option('--title', help='Title (wildcard)')
@click.option('--name', help='URL name or title (wildcard)')
@click.option('--tree', is_flag=True, help='Request the tree listing')
@pass_context
@require_config
def contents_list(
    ctx: BaserContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    limit: Optional[int],
    page: Optional[int],
    status: Optional[str],
    content_type: Optional[str],
    site_id: Optional[int],
    parent_id: Optional[int],
    author_id: Optional[int],
    folder_id: Optional[int],
    title: Optional[str],
    name: Optional[str],
    tree: bool
):
    """
    List contents.

    \b
    Examples:
      baser contents list
      baser contents list --status publish --type Page
    """
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_contents(
            list_type="tree" if tree else None,
            limit=limit,
            page=page,
            status=status,
            type=content_type,
            site_id=site_id,
            parent_id=parent_id,
            author_id=author_id,
            folder_id=folder_id,
            title=title,
            name=name,
        ),
        CONTENT_COLUMNS,
        "Contents",
    )


@contents.command('get')
@common_options
@click.argument('content_id', type=int)
@pass_context
@require_config
def contents_get(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_id: int):
    """Show a content and its site."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_content(content_id))


@contents.command('next')
@common_options
@click.argument('content_id', type=int)
@pass_context
@require_config
def contents_next(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_id: int):
    """Show the content after CONTENT_ID."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_next_content(content_id))


@contents.command('prev')
@common_options
@click.argument('content_id', type=int)
@pass_context
@require_config
def contents_prev(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_id: int):
    """Show the content before CONTENT_ID."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_prev_content(content_id))


@contents.command('global-navi')
@common_options
@click.argument('content_id', type=int)
@pass_context
@require_config
def contents_global_navi(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_id: int):
    """List the global navigation for CONTENT_ID."""
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_global_navi(content_id),
        CONTENT_COLUMNS,
        "Global navigation",
    )


@contents.command('crumbs')
@common_options
@click.argument('content_id', type=int)
@pass_context
@require_config
def contents_crumbs(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_id: int):
    """List the breadcrumb trail for CONTENT_ID."""
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_crumbs(content_id),
        CONTENT_COLUMNS,
        "Breadcrumbs",
    )


@contents.command('local-navi')
@common_options
@click.argument('content_id', type=int)
@pass_context
@require_config
def contents_local_navi(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_id: int):
    """List the local navigation for CONTENT_ID."""
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_local_navi(content_id),
        CONTENT_COLUMNS,
        "Local navigation",
    )


# ============================================================================
# Content Folder Commands
# ============================================================================

@cli.group('folders')
def folders():
    """Content folders."""
    pass


@folders.command('list')
@common_options
@click.option('--limit', '-n', type=int, help='Items per page')
@click.option('--page', type=int, help='Page number')
@click.option('--status', type=STATUS_CHOICE, help='Published only, or all')
@click.option('--folder-template', help='Folder template (fuzzy)')
@click.option('--page-template', help='Page template (fuzzy)')
@pass_context
@require_config
def folders_list(
    ctx: BaserContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    limit: Optional[int],
    page: Optional[int],
    status: Optional[str],
    folder_template: Optional[str],
    page_template: Optional[str]
):
    """List content folders."""
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_content_folders(
            limit=limit,
            page=page,
            status=status,
            folder_template=folder_template,
            page_template=page_template,
        ),
        FOLDER_COLUMNS,
        "Content folders",
    )


@folders.command('get')
@common_options
@click.argument('content_folder_id', type=int)
@pass_context
@require_config
def folders_get(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, content_folder_id: int):
    """Show a content folder."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_content_folder(content_folder_id))


# ============================================================================
# Page Commands
# ============================================================================

@cli.group('pages')
def pages():
    """Fixed pages."""
    pass


@pages.command('list')
@common_options
@click.option('--limit', '-n', type=int, help='Items per page')
@click.option('--page', type=int, help='Page number')
@click.option('--status', type=STATUS_CHOICE, help='Published only, or all')
@click.option('--contents', 'body', help='Body text (fuzzy)')
@click.option('--draft', help='Draft text (fuzzy)')
@pass_context
@require_config
def pages_list(
    ctx: BaserContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    limit: Optional[int],
    page: Optional[int],
    status: Optional[str],
    body: Optional[str],
    draft: Optional[str]
):
    """List pages."""
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_pages(
            limit=limit,
            page=page,
            status=status,
            contents=body,
            draft=draft,
        ),
        PAGE_COLUMNS,
        "Pages",
    )


@pages.command('get')
@common_options
@click.argument('page_id', type=int)
@pass_context
@require_config
def pages_get(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, page_id: int):
    """Show a page."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_page(page_id))


# ============================================================================
# Search Command
# ============================================================================

@cli.command('search')
@common_options
@click.argument('query', required=False)
@click.option('--site-id', type=int, help='Site ID')
@click.option('--content-id', type=int, help='Content ID')
@click.option('--folder-id', type=int, help='Folder ID')
@click.option('--type', 'content_type', help='Content type')
@click.option('--model', help='Model (entity) name')
@click.option('--priority', help='Priority')
@pass_context
@require_config
def search(
    ctx: BaserContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    query: Optional[str],
    site_id: Optional[int],
    content_id: Optional[int],
    folder_id: Optional[int],
    content_type: Optional[str],
    model: Optional[str],
    priority: Optional[str]
):
    """
    Search the site index.

    \b
    Examples:
      baser search news
      baser search --type Page --format json
    """
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_search_indexes(
            q=query,
            site_id=site_id,
            content_id=content_id,
            folder_id=folder_id,
            type=content_type,
            model=model,
            priority=priority,
        ),
        SEARCH_COLUMNS,
        "Search results",
    )


# ============================================================================
# Blog Commands
# ============================================================================

@cli.group('blog')
def blog():
    """Blog contents and posts."""
    pass


@blog.command('contents')
@common_options
@click.option('--limit', '-n', type=int, help='Items per page')
@click.option('--page', type=int, help='Page number')
@click.option('--status', type=STATUS_CHOICE, help='Published only, or all')
@click.option('--description', help='Blog description (fuzzy)')
@pass_context
@require_config
def blog_contents(
    ctx: BaserContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    limit: Optional[int],
    page: Optional[int],
    status: Optional[str],
    description: Optional[str]
):
    """List blog contents."""
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_blog_contents(
            limit=limit,
            page=page,
            status=status,
            description=description,
        ),
        BLOG_CONTENT_COLUMNS,
        "Blog contents",
    )


@blog.command('content')
@common_options
@click.argument('blog_content_id', type=int)
@pass_context
@require_config
def blog_content(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, blog_content_id: int):
    """Show a blog content."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_blog_content(blog_content_id))


@blog.command('posts')
@common_options
@click.option('--limit', '-n', type=int, help='Number of posts')
@click.option('--status', type=STATUS_CHOICE, help='Published only, or all')
@click.option('--order', help='Sort field (default: posted)')
@click.option('--direction', type=click.Choice(['asc', 'desc']), help='Sort direction')
@click.option('--blog-content-id', type=int, help='Blog content ID')
@click.option('--title', help='Title (fuzzy)')
@click.option('--category', help='Category name')
@click.option('--tag', help='Tag name')
@click.option('--keyword', help='Title, summary or detail (fuzzy)')
@click.option('--author', help='Author login name')
@click.option('--year', help='Posted year')
@click.option('--month', help='Posted month')
@click.option('--day', help='Posted day')
@pass_context
@require_config
def blog_posts(
    ctx: BaserContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    limit: Optional[int],
    status: Optional[str],
    order: Optional[str],
    direction: Optional[str],
    blog_content_id: Optional[int],
    title: Optional[str],
    category: Optional[str],
    tag: Optional[str],
    keyword: Optional[str],
    author: Optional[str],
    year: Optional[str],
    month: Optional[str],
    day: Optional[str]
):
    """
    List blog posts.

    \b
    Examples:
      baser blog posts --limit 5
      baser blog posts --blog-content-id 1 --category news
    """
    _show_list(
        ctx, verbose, quiet, output_format,
        lambda client: client.get_blog_posts(
            limit=limit,
            status=status,
            order=order,
            direction=direction,
            blog_content_id=blog_content_id,
            title=title,
            category=category,
            tag=tag,
            keyword=keyword,
            author=author,
            year=year,
            month=month,
            day=day,
        ),
        BLOG_POST_COLUMNS,
        "Blog posts",
    )


@blog.command('post')
@common_options
@click.argument('blog_post_id', type=int)
@pass_context
@require_config
def blog_post(ctx: BaserContext, verbose: bool, quiet: bool, output_format: str, blog_post_id: int):
    """Show a blog post."""
    _show_one(ctx, verbose, quiet, output_format, lambda client: client.get_blog_post(blog_post_id))


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix='BASER')
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)


if __name__ == '__main__':
    main()
