"""
Post Commands - Publishing, Liking and Browsing

Every command reads or writes the store selected by the global options.
Commands that act on behalf of someone (create, like, liked) resolve the
caller from --user, $POSTBOARD_USER or default_user in the config.

Examples:
    python main.py --user alice.near create --title Hello --tags news,near
    python main.py --user bob.near like 0
    python main.py by-tag near --format json
"""

import click
from rich.markup import escape

from src.application.use_cases.manage_posts import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikedPostsRequest,
    LikedPostsUseCase,
    LikePostRequest,
    LikePostUseCase,
    ListPostsUseCase,
    PostsByTagRequest,
    PostsByTagUseCase,
)
from src.domain.entities.post import PostId
from src.infrastructure.persistence import export_state
from src.presentation.context import AppContext, reports_errors
from src.presentation.helpers.post_display import PostDisplay


OUTPUT_FORMATS = click.Choice(['table', 'json'])


def _parse_post_id(value: str) -> int:
    return PostId.parse(value).value


@click.command('create')
@click.option('--title', '-t', required=True, help='Post title')
@click.option('--description', '-d', default='', help='Post description')
@click.option('--tags', required=True, help='Comma separated tags, kept verbatim (e.g. "news,near")')
@click.option('--media', '-m', default='', help='Media reference (URL or file name)')
@click.option('--format', 'output_format', type=OUTPUT_FORMATS, default='table')
@click.pass_obj
@reports_errors
def create_command(app: AppContext, title: str, description: str, tags: str, media: str, output_format: str) -> None:
    """Publish a new post owned by the caller."""
    caller = app.current_caller_identity()
    response = CreatePostUseCase(app.service).execute(
        CreatePostRequest(caller=caller, title=title, description=description, tags=tags, media=media)
    )

    if output_format == 'json':
        click.echo(PostDisplay.posts_to_json([response.post]))
        return
    app.console.print(f"[green]✅ Created post {response.post.id}[/green]")
    app.console.print(PostDisplay.create_post_table(response.post))


@click.command('list')
@click.option('--format', 'output_format', type=OUTPUT_FORMATS, default='table')
@click.pass_obj
@reports_errors
def list_command(app: AppContext, output_format: str) -> None:
    """List every post in creation order."""
    response = ListPostsUseCase(app.service).execute()

    if output_format == 'json':
        click.echo(PostDisplay.entries_to_json(response.entries))
        return
    if not response.entries:
        app.console.print("[yellow]No posts yet[/yellow]")
        return
    posts = [post for _, post in response.entries]
    app.console.print(PostDisplay.create_posts_table(posts, title=f"All posts ({response.total})"))


@click.command('show')
@click.argument('post_id')
@click.option('--format', 'output_format', type=OUTPUT_FORMATS, default='table')
@click.pass_obj
@reports_errors
def show_command(app: AppContext, post_id: str, output_format: str) -> None:
    """Show a single post by id."""
    response = GetPostUseCase(app.service).execute(GetPostRequest(post_id=_parse_post_id(post_id)))

    if output_format == 'json':
        click.echo(PostDisplay.posts_to_json([response.post]))
        return
    app.console.print(PostDisplay.create_post_table(response.post))


@click.command('like')
@click.argument('post_id')
@click.option('--format', 'output_format', type=OUTPUT_FORMATS, default='table')
@click.pass_obj
@reports_errors
def like_command(app: AppContext, post_id: str, output_format: str) -> None:
    """Like a post as the caller. Liking twice counts twice."""
    caller = app.current_caller_identity()
    response = LikePostUseCase(app.service).execute(
        LikePostRequest(caller=caller, post_id=_parse_post_id(post_id))
    )

    if output_format == 'json':
        click.echo(PostDisplay.posts_to_json([response.post]))
        return
    app.console.print(
        f"[green]❤️  {escape(caller)} liked post {response.post.id} "
        f"({response.post.like_count} like(s))[/green]"
    )


@click.command('liked')
@click.option('--format', 'output_format', type=OUTPUT_FORMATS, default='table')
@click.pass_obj
@reports_errors
def liked_command(app: AppContext, output_format: str) -> None:
    """List the posts the caller has liked, in like order."""
    caller = app.current_caller_identity()
    response = LikedPostsUseCase(app.service).execute(LikedPostsRequest(caller=caller))

    if output_format == 'json':
        click.echo(PostDisplay.posts_to_json(response.posts))
        return
    app.console.print(PostDisplay.create_posts_table(response.posts, title=f"Liked by {escape(caller)} ({response.total})"))


@click.command('by-tag')
@click.argument('tag')
@click.option('--format', 'output_format', type=OUTPUT_FORMATS, default='table')
@click.pass_obj
@reports_errors
def by_tag_command(app: AppContext, tag: str, output_format: str) -> None:
    """List the posts created with TAG."""
    response = PostsByTagUseCase(app.service).execute(PostsByTagRequest(tag=tag))

    if output_format == 'json':
        click.echo(PostDisplay.posts_to_json(response.posts))
        return
    app.console.print(PostDisplay.create_posts_table(response.posts, title=f"Tagged '{escape(tag)}' ({response.total})"))


@click.command('export')
@click.option('--output', '-o', required=True, type=click.Path(dir_okay=False), help='JSON file to write')
@click.pass_obj
@reports_errors
def export_command(app: AppContext, output: str) -> None:
    """Export posts, both indices and the post counter as JSON."""
    state = export_state(app.repositories, output)
    app.console.print(
        f"[green]💾 Exported {len(state['posts'])} post(s), {len(state['posts_by_tag'])} tag(s) "
        f"and {len(state['likes_by_user'])} user(s) to {escape(output)}[/green]"
    )
